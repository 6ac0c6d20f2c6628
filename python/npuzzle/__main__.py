from npuzzle.cli import app

app(prog_name="npuzzle")
