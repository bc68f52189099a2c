URL = "https://www.moneycontrol.com/stocks/marketstats/nsegainer/index.php"
FILENAME = "gainers.json"
TITLE = "Gainers Information"
IS_GAINER = True
