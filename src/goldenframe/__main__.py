from goldenframe.cli import app

app(prog_name="goldenframe")
