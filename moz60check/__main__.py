from moz60check.cli.main import app

app()
