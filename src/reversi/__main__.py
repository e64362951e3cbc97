from reversi.main import app

app()
