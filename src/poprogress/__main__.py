from poprogress.cli import run

run()
