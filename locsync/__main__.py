from locsync.main import run_cli

run_cli()
