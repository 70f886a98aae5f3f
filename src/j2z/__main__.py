from j2z.cli.main import app

app()
