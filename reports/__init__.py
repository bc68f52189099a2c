from . import gainers, losers

REPORT_MAP = {
    'gainers': gainers,
    'losers': losers,
}
