from deckstats.interface.cli import app

app(prog_name="deckstats")
