from fecresults.tasks import cli

cli(prog_name='fecresults')
