from tablecopy.cli.main import run

run()
