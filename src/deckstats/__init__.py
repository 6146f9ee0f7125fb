from deckstats.consts import VERSION

__version__ = VERSION
