import click

@click.command()
def info():
    """Print the host information reported by /info."""
    from serverinfo.hwosinfo.collector import collect
    click.echo(collect().model_dump_json(indent=4))
