from inputcounter.cli import cli

cli()
