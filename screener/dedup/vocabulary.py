#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Exposure Vocabulary

Static lookup tables used by the name normalizer and exposure classifier,
grouped by dimension. Every table is an ordered tuple; for the dimension
tables the first entry with a matching alias wins.

Aliases are written as plain text and tokenized with the same tokenizer
that is applied to fund names, so "S&P 500", "S&P500" and "ASIA EX-JAPAN"
all compare token by token.
"""

# 未识别发行商的优先级
UNKNOWN_PROVIDER_PRIORITY = 99

# 发行商优先级 (越小越优先)
PROVIDER_PRIORITY = {
    'ISHARES': 1,
    'VANGUARD': 2,
    'AMUNDI': 3,
    'LYXOR': 3,
    'XTRACKERS': 4,
    'SPDR': 5,
    'INVESCO': 6,
    'UBS': 7,
    'DEKA': 8,
    'HSBC': 9,
    'WISDOMTREE': 10,
    'VANECK': 11,
    'PIMCO': 12,
    'FIDELITY': 13,
    'BLACKROCK': 14,
    'STATESTREET': 15,
    'DIMENSIONAL': 16,
    'OSSIAM': 17,
    'FLOSSBACH': 18,
    'DWS': 19,
    'GLOBALX': 20,
    'FRANKLIN': 21,
    'LGIM': 22,
    'ABRDN': 23,
    'NOMURA': 24,
    'TABULA': 25,
}

# 发行商别名 -> 标准名 (交易所名称常被截断，如 "ISHSIII-CORE MSCI WLD")
PROVIDER_ALIASES = (
    ('ISHARES', 'ISHARES'),
    ('ISHS', 'ISHARES'),
    ('ISHSII', 'ISHARES'),
    ('ISHSIII', 'ISHARES'),
    ('ISHSIV', 'ISHARES'),
    ('ISHSV', 'ISHARES'),
    ('ISHSVI', 'ISHARES'),
    ('ISHSVII', 'ISHARES'),
    ('ISH', 'ISHARES'),
    ('IS', 'ISHARES'),
    ('SS SPDR', 'SPDR'),
    ('SS', 'SPDR'),
    ('SSGA', 'SPDR'),
    ('SPDR', 'SPDR'),
    ('STATE STREET', 'STATESTREET'),
    ('XTRACKERS', 'XTRACKERS'),
    ('XTRK', 'XTRACKERS'),
    ('XTRAC', 'XTRACKERS'),
    ('XTR', 'XTRACKERS'),
    ('X', 'XTRACKERS'),
    ('LYXOR', 'LYXOR'),
    ('LYX', 'LYXOR'),
    ('AMUNDI', 'AMUNDI'),
    ('AIS', 'AMUNDI'),
    ('VANECK', 'VANECK'),
    ('VAN ECK', 'VANECK'),
    ('WISDOMTREE', 'WISDOMTREE'),
    ('WT', 'WISDOMTREE'),
    ('FRANKLIN', 'FRANKLIN'),
    ('FRK', 'FRANKLIN'),
    ('FTGF', 'FRANKLIN'),
    ('INVESCO', 'INVESCO'),
    ('INV', 'INVESCO'),
    ('GLOBAL X', 'GLOBALX'),
    ('GLOBALX', 'GLOBALX'),
    ('GLX', 'GLOBALX'),
    ('VANGUARD', 'VANGUARD'),
    ('VANG', 'VANGUARD'),
    ('VAN', 'VANGUARD'),
    ('UBS', 'UBS'),
    ('DEKA', 'DEKA'),
    ('HSBC', 'HSBC'),
    ('PIMCO', 'PIMCO'),
    ('FIDELITY', 'FIDELITY'),
    ('BLACKROCK', 'BLACKROCK'),
    ('DIMENSIONAL', 'DIMENSIONAL'),
    ('OSSIAM', 'OSSIAM'),
    ('FLOSSBACH', 'FLOSSBACH'),
    ('DWS', 'DWS'),
    ('LGIM', 'LGIM'),
    ('L&G', 'LGIM'),
    ('ABRDN', 'ABRDN'),
    ('NOMURA', 'NOMURA'),
    ('TABULA', 'TABULA'),
)

# 缩写展开 (指数简称、行业/地区缩写 -> 标准词)
ABBREVIATIONS = (
    # 指数
    ('S&P 500', 'SP500'),
    ('S&P500', 'SP500'),
    ('SPTSE', 'SPTSX'),
    ('STOXX 600', 'STOXX600'),
    ('EURO STOXX 50', 'EUROSTOXX50'),
    ('EURO STOXX', 'EUROSTOXX'),
    ('ESTX50', 'EUROSTOXX50'),
    ('ESTX 50', 'EUROSTOXX50'),
    ('EX600', 'STOXX600'),
    ('EURSTX', 'EUROSTOXX'),
    ('NASDAQ 100', 'NASDAQ100'),
    ('NASDAQ-100', 'NASDAQ100'),
    ('NIKKEI 225', 'NIKKEI225'),
    ('RUSSELL 2000', 'RUSSELL2000'),
    ('RUSSELL 1000', 'RUSSELL1000'),
    ('FTSE MIB', 'FTSEMIB'),
    ('CAC 40', 'CAC40'),
    ('IBEX 35', 'IBEX35'),
    ('CSI 300', 'CSI300'),
    ('HANG SENG', 'HANGSENG'),
    ('ACWI', 'ALLCOUNTRY'),
    ('ALL COUNTRY', 'ALLCOUNTRY'),
    ('ALL-WORLD', 'ALLWORLD'),
    ('ALL WLD', 'ALLWORLD'),
    ('FTSE ALL', 'ALLWORLD'),
    ('WLD', 'WORLD'),
    # 地区
    ('UNITED KINGDOM', 'UK'),
    ('UNITED STATES', 'US'),
    ('U.S.A.', 'US'),
    ('U.S.', 'US'),
    ('SOUTH KOREA', 'KOREA'),
    ('SOUTH AFRICA', 'SOUTHAFRICA'),
    ('LATIN AMERICA', 'LATAM'),
    ('LAT AM', 'LATAM'),
    ('LATIN AM', 'LATAM'),
    ('EASTERN EUROPE', 'EASTERNEUROPE'),
    ('EAST EUROPE', 'EASTERNEUROPE'),
    ('SOUTHEAST ASIA', 'SOUTHEASTASIA'),
    ('ASIA EX JAPAN', 'ASIAEXJAPAN'),
    ('AXJ', 'ASIAEXJAPAN'),
    ('EX JAPAN', 'ASIAEXJAPAN'),
    ('EUROPE EX UK', 'EUROPEEXUK'),
    ('PACIFIC EX JAPAN', 'PACIFICEXJAPAN'),
    ('WORLD EX US', 'WORLDEXUS'),
    ('EMERGING ASIA', 'EMERGINGASIA'),
    ('FRONTIER MARKETS', 'FRONTIERMARKETS'),
    ('NORTH AMERICA', 'NORTHAMERICA'),
    ('ASIA PACIFIC', 'ASIAPACIFIC'),
    ('PAN EUROPE', 'EUROPE'),
    ('PANEUROPE', 'EUROPE'),
    ('EMERGING MARKETS', 'EMERGINGMARKETS'),
    ('EMERGING MKTS', 'EMERGINGMARKETS'),
    ('EM MKTS', 'EMERGINGMARKETS'),
    ('JPN', 'JAPAN'),
    # 因子
    ('MINIMUM VOLATILITY', 'MINVOL'),
    ('MINIMUM VARIANCE', 'MINVOL'),
    ('MIN VOLATILITY', 'MINVOL'),
    ('LOW VOLATILITY', 'MINVOL'),
    ('LOW VOL', 'MINVOL'),
    ('MIN VOL', 'MINVOL'),
    ('MINVAR', 'MINVOL'),
    ('LOWVOL', 'MINVOL'),
    ('LOWVOLATILITY', 'MINVOL'),
    ('MINIMUMVOLATILITY', 'MINVOL'),
    ('MINIMUMVARIANCE', 'MINVOL'),
    ('HIGH DIVIDEND', 'DIVIDEND'),
    ('HIGH DIV', 'DIVIDEND'),
    ('HDY', 'DIVIDEND'),
    ('DIVIDENDEN', 'DIVIDEND'),
    ('EQUAL WEIGHT', 'EQUALWEIGHT'),
    ('EQUAL WEIGHTED', 'EQUALWEIGHT'),
    ('EQ WGT', 'EQUALWEIGHT'),
    ('EQWT', 'EQUALWEIGHT'),
    ('MULTI FACTOR', 'MULTIFACTOR'),
    ('SMALL CAP', 'SMALLCAP'),
    ('SMALLC', 'SMALLCAP'),
    ('MID CAP', 'MIDCAP'),
    ('LARGE CAP', 'LARGECAP'),
    ('MEGA CAP', 'MEGACAP'),
    ('SMALL MID', 'SMID'),
    ('INVESTABLE MARKET', 'IMI'),
    # 行业
    ('INFORMATION TECHNOLOGY', 'TECHNOLOGY'),
    ('INFO TECH', 'TECHNOLOGY'),
    ('COMM SERVICES', 'COMMUNICATIONS'),
    ('COMMUNICATION SERVICES', 'COMMUNICATIONS'),
    ('REAL ESTATE', 'REALESTATE'),
    ('CONSUMER DISCRETIONARY', 'CONSUMERDISCRETIONARY'),
    ('CONSUMER STAPLES', 'CONSUMERSTAPLES'),
    ('BASIC RESOURCES', 'BASICRESOURCES'),
    ('NATURAL RESOURCES', 'BASICRESOURCES'),
    ('BASICRESOURCE', 'BASICRESOURCES'),
    ('SEMICNDCT', 'SEMICONDUCTORS'),
    ('SEMICONDUCTOR', 'SEMICONDUCTORS'),
    ('HLTHCARE', 'HEALTHCARE'),
    ('HEALTH CARE', 'HEALTHCARE'),
    ('CLEAN ENERGY', 'CLEANENERGY'),
    ('RENEWABLE ENERGY', 'CLEANENERGY'),
    ('CLOUD COMPUTING', 'CLOUDCOMPUTING'),
    ('ARTIFICIAL INTELLIGENCE', 'AI'),
    ('FUTURE MOBILITY', 'FUTUREMOBILITY'),
    ('ELECTRIC VEHICLES', 'FUTUREMOBILITY'),
    ('GOLD MINERS', 'GOLDMINERS'),
    ('SILVER MINERS', 'SILVERMINERS'),
    # 债券
    ('BONDS', 'BOND'),
    ('USTREASURY', 'GOVBOND'),
    ('TRESURY', 'GOVBOND'),
    ('TREASURY', 'GOVBOND'),
    ('TREASURIES', 'GOVBOND'),
    ('GOV BOND', 'GOVBOND'),
    ('GOVT BOND', 'GOVBOND'),
    ('GOVT BONDS', 'GOVBOND'),
    ('GOVERNMENT BOND', 'GOVBOND'),
    ('GOVERNMENT BONDS', 'GOVBOND'),
    ('CORP BOND', 'CORPBOND'),
    ('CORP BONDS', 'CORPBOND'),
    ('CORPORATE BOND', 'CORPBOND'),
    ('CORPORATE BONDS', 'CORPBOND'),
    ('AGGREGATE BOND', 'AGGBOND'),
    ('HIGH YIELD', 'HIGHYIELD'),
    ('INFLATION LINKED', 'INFLATIONLINKED'),
    ('INFL LINKED', 'INFLATIONLINKED'),
    ('FIXED INCOME', 'FIXEDINCOME'),
    ('SHORT TERM', 'SHORTDURATION'),
    ('ULTRA SHORT', 'SHORTDURATION'),
    ('ULTRASHORT', 'SHORTDURATION'),
    ('0-1YR', 'SHORTDURATION'),
    ('0-3YR', 'SHORTDURATION'),
    ('1-3YR', 'SHORTDURATION'),
    ('1-3 YEAR', 'SHORTDURATION'),
    ('LONG TERM', 'LONGDURATION'),
    ('10+YR', 'LONGDURATION'),
    ('15-30YR', 'LONGDURATION'),
    ('20+YR', 'LONGDURATION'),
    ('25+YR', 'LONGDURATION'),
    ('CONVERTIBLE', 'CONVERTIBLEBOND'),
    ('CONVERTIBLES', 'CONVERTIBLEBOND'),
    # ESG
    ('PARIS ALIGNED', 'PAB'),
    ('LOW CARBON', 'LOWCARBON'),
    ('NET ZERO', 'NETZERO'),
    ('FOSSIL FUEL FREE', 'FOSSILFUELFREE'),
)

# 地区
REGION_TABLE = (
    (('EUROSTOXX50',), 'EUROZONE'),
    (('EUROSTOXX', 'EUROSTX'), 'EUROPE'),
    (('STOXX600',), 'EUROPE'),
    (('ALLCOUNTRY', 'ALLWORLD'), 'GLOBAL'),
    (('SP500', 'RUSSELL1000'), 'US'),
    (('NASDAQ100',), 'US'),
    (('RUSSELL2000',), 'US'),
    (('SPTSX',), 'CANADA'),
    (('FTSEMIB',), 'ITALY'),
    (('CAC40',), 'FRANCE'),
    (('IBEX35',), 'SPAIN'),
    (('ASX200',), 'AUSTRALIA'),
    (('NIKKEI225', 'TOPIX'), 'JAPAN'),
    (('HANGSENGCHINA', 'HANGSENG'), 'CHINA'),
    (('CSI300',), 'CHINA'),
    (('KOSPI',), 'KOREA'),
    (('SENSEX', 'NIFTY'), 'INDIA'),
    (('MOEX',), 'RUSSIA'),
    (('TECDAX', 'DAX', 'MDAX', 'SDAX'), 'GERMANY'),
    (('WORLD',), 'WORLD'),
    (('GLOBAL',), 'GLOBAL'),
    (('EMERGINGMARKETS', 'EMERGING', 'EM'), 'EM'),
    (('EUROPE', 'EUROPEAN', 'EMU'), 'EUROPE'),
    (('EUROZONE',), 'EUROZONE'),
    (('NORTHAMERICA',), 'US'),
    (('USA', 'US'), 'US'),
    (('UK', 'UNITEDKINGDOM'), 'UK'),
    (('JAPAN',), 'JAPAN'),
    (('CHINA',), 'CHINA'),
    (('INDIA',), 'INDIA'),
    (('GERMANY',), 'GERMANY'),
    (('FRANCE',), 'FRANCE'),
    (('SWITZERLAND',), 'SWITZERLAND'),
    (('CANADA',), 'CANADA'),
    (('AUSTRALIA',), 'AUSTRALIA'),
    (('KOREA',), 'KOREA'),
    (('BRAZIL',), 'BRAZIL'),
    (('TAIWAN',), 'TAIWAN'),
    (('MEXICO',), 'MEXICO'),
    (('INDONESIA',), 'INDONESIA'),
    (('VIETNAM',), 'VIETNAM'),
    (('THAILAND',), 'THAILAND'),
    (('SOUTHAFRICA',), 'SOUTH-AFRICA'),
    (('ASIAPACIFIC', 'APAC'), 'ASIA-PACIFIC'),
    (('ASIA',), 'ASIA'),
    (('PACIFIC',), 'PACIFIC'),
    (('AFRICA',), 'AFRICA'),
    (('FRONTIERMARKETS', 'FRONTIER'), 'FRONTIER'),
    (('INTERNATIONAL',), 'WORLD'),
)

# 子地区
SUBREGION_TABLE = (
    (('LATAM',), 'LATAM'),
    (('EASTERNEUROPE',), 'EASTERN-EUROPE'),
    (('SOUTHEASTASIA', 'ASEAN'), 'SE-ASIA'),
    (('ASIAEXJAPAN',), 'ASIA-EX-JP'),
    (('EUROPEEXUK',), 'EUROPE-EX-UK'),
    (('PACIFICEXJAPAN',), 'PACIFIC-EX-JP'),
    (('WORLDEXUS',), 'WORLD-EX-US'),
    (('EMERGINGASIA',), 'EMERGING-ASIA'),
    (('NORDICS', 'NORDIC', 'SCANDINAVIA'), 'NORDICS'),
    (('GULF', 'GCC'), 'GULF'),
)

# 因子倾斜 (收集全部命中)
FACTOR_TABLE = (
    (('VALUE', 'VAL'), 'VALUE'),
    (('DIVIDEND', 'DIV'), 'DIVIDEND'),
    (('MOMENTUM', 'MOM'), 'MOMENTUM'),
    (('QUALITY', 'QUAL'), 'QUALITY'),
    (('SMID',), 'SMID'),
    (('SMALLCAP', 'SC'), 'SMALLCAP'),
    (('MIDCAP',), 'MIDCAP'),
    (('MEGACAP', 'LARGECAP'), 'LARGECAP'),
    (('IMI',), 'IMI'),
    (('MINVOL',), 'MINVOL'),
    (('GROWTH',), 'GROWTH'),
    (('EQUALWEIGHT',), 'EQUALWEIGHT'),
    (('MULTIFACTOR',), 'MULTIFACTOR'),
    (('DEVELOPED',), 'DEVELOPED'),
)

# 行业
SECTOR_TABLE = (
    (('SEMICONDUCTORS',), 'SEMICONDUCTORS'),
    (('TECHNOLOGY', 'TECH'), 'TECH'),
    (('HEALTHCARE',), 'HEALTHCARE'),
    (('FINANCIALS', 'FINANCIAL', 'BANKS', 'BANKING'), 'FINANCIALS'),
    (('BASICRESOURCES',), 'BASIC-RESOURCES'),
    (('MATERIALS',), 'MATERIALS'),
    (('ENERGY',), 'ENERGY'),
    (('UTILITIES',), 'UTILITIES'),
    (('INDUSTRIALS',), 'INDUSTRIALS'),
    (('REALESTATE',), 'REAL-ESTATE'),
    (('CONSUMERDISCRETIONARY', 'DISCRETIONARY'), 'CONSUMER-DISC'),
    (('CONSUMERSTAPLES', 'STAPLES'), 'CONSUMER-STAPLES'),
    (('COMMUNICATIONS', 'TELECOM'), 'COMMUNICATIONS'),
    (('CYBERSECURITY',), 'CYBERSECURITY'),
    (('ROBOTICS', 'AUTOMATION'), 'ROBOTICS'),
    (('WATER',), 'WATER'),
    (('CLEANENERGY',), 'CLEAN-ENERGY'),
    (('BIOTECHNOLOGY', 'BIOTECH', 'BIOPHARMA'), 'BIOTECH'),
    (('PHARMACEUTICALS', 'PHARMA'), 'PHARMA'),
    (('CLOUDCOMPUTING',), 'CLOUD'),
    (('AI',), 'AI'),
    (('FUTUREMOBILITY',), 'MOBILITY'),
    (('GOLDMINERS',), 'GOLD-MINERS'),
    (('SILVERMINERS',), 'SILVER-MINERS'),
    (('MINERS', 'MINING'), 'MINERS'),
    (('DEFENSE', 'DEFENCE', 'AEROSPACE'), 'DEFENSE'),
    (('INFRASTRUCTURE',), 'INFRASTRUCTURE'),
    (('AGRIBUSINESS', 'AGRICULTURE'), 'AGRICULTURE'),
)

# 债券信号
BOND_SIGNALS = (
    'BOND', 'RENTEN', 'FIXEDINCOME', 'GOVBOND', 'CORPBOND', 'HIGHYIELD',
    'INFLATIONLINKED', 'AGGBOND', 'CONVERTIBLEBOND',
)

# 债券类型 (有债券信号但无具体类型时默认 AGGREGATE)
BOND_TYPE_TABLE = (
    (('GOVBOND',), 'GOVERNMENT'),
    (('CORPBOND',), 'CORPORATE'),
    (('HIGHYIELD',), 'HIGH-YIELD'),
    (('INFLATIONLINKED',), 'INFLATION-LINKED'),
    (('CONVERTIBLEBOND',), 'CONVERTIBLE'),
    (('AGGBOND', 'AGGREGATE', 'BOND'), 'AGGREGATE'),
)
DEFAULT_BOND_TYPE = 'AGGREGATE'

# 久期
BOND_DURATION_TABLE = (
    (('SHORTDURATION',), 'SHORT'),
    (('LONGDURATION',), 'LONG'),
)

ESG_SIGNALS = (
    'ESG', 'SRI', 'PAB', 'CTB', 'CLIMATE', 'SUSTAINABLE', 'RESPONSIBLE',
    'GREEN', 'IMPACT', 'LOWCARBON', 'NETZERO', 'FOSSILFUELFREE',
)

HEDGE_SIGNALS = ('HEDGED', 'HDG', 'HDGD', 'HGD')

# 商品 (None 表示一篮子/泛商品)
COMMODITY_TABLE = (
    (('GOLD', 'XAU', 'GOLDBARREN'), 'GOLD'),
    (('SILVER', 'XAG', 'SILBER'), 'SILVER'),
    (('PLATINUM', 'XPT', 'PLATIN'), 'PLATINUM'),
    (('PALLADIUM', 'XPD'), 'PALLADIUM'),
    (('COPPER', 'KUPFER'), 'COPPER'),
    (('NICKEL',), 'NICKEL'),
    (('ZINC', 'ZINK'), 'ZINC'),
    (('TIN', 'ZINN'), 'TIN'),
    (('ALUMINIUM', 'ALUMINUM'), 'ALUMINIUM'),
    (('COBALT',), 'COBALT'),
    (('LITHIUM',), 'LITHIUM'),
    (('CRUDE OIL', 'BRENT', 'WTI', 'PETROLEUM'), 'OIL'),
    (('NATURAL GAS', 'NAT GAS'), 'GAS'),
    (('WHEAT', 'WEIZEN'), 'WHEAT'),
    (('CORN', 'MAIS'), 'CORN'),
    (('SOYBEAN', 'SOYBEANS', 'SOYA'), 'SOYBEANS'),
    (('CARBON', 'CO2', 'EMISSION', 'EMISSIONS'), 'CARBON'),
    (('PRECIOUS METALS', 'PRECIOUS MET'), 'PRECIOUS'),
    (('INDUSTRIAL METALS', 'IND METALS'), 'INDUSTRIALMETALS'),
    (('AGRICULTURE', 'AGRICULTURAL'), 'AGRICULTURE'),
    (('LIVESTOCK',), 'LIVESTOCK'),
)

COMMODITY_BASKET_SIGNALS = (
    'BLOOMBERG COMMODITY', 'BROAD COMMODITY', 'DIVERSIFIED COMMODITY',
    'RICI', 'COMMODITY', 'COMMODITIES',
)

# 商品修饰词 (仅 HEDGED 进入分组键)
COMMODITY_MODIFIER_TABLE = (
    (('HEDGED', 'HDG', 'HDGD', 'HGD', 'CURRENCY HEDGED'), 'HEDGED'),
    (('2X', '2EX', 'DOUBLE LONG', 'DAILY 2X'), '2X'),
    (('SHORT', 'INVERSE', '-1X', 'DAILY SHORT'), 'SHORT'),
    (('MINERS', 'MINING', 'MINE'), 'MINERS'),
)
