from reviewkit.cli import app

app(prog_name="reviewkit")
