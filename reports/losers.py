URL = "https://www.moneycontrol.com/stocks/marketstats/nseloser/index.php"
FILENAME = "losers.json"
TITLE = "Losers Information"
IS_GAINER = False
