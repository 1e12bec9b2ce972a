from .app.cli import PROG, app

app(prog_name=PROG)
