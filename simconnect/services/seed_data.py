"""Reference dataset written by ``CatalogStore.initialize`` on first run."""

SEED_VERSION = "2026-10"

INITIAL_COUNTRIES = [
    {"id": "es", "name_en": "Spain", "name_es": "España", "continent": "Europe", "currency": "EUR", "flag": "🇪🇸"},
    {"id": "us", "name_en": "United States", "name_es": "Estados Unidos", "continent": "North America", "currency": "USD", "flag": "🇺🇸"},
    {"id": "jp", "name_en": "Japan", "name_es": "Japón", "continent": "Asia", "currency": "JPY", "flag": "🇯🇵"},
    {"id": "mx", "name_en": "Mexico", "name_es": "México", "continent": "North America", "currency": "MXN", "flag": "🇲🇽"},
    {"id": "fr", "name_en": "France", "name_es": "Francia", "continent": "Europe", "currency": "EUR", "flag": "🇫🇷"},
    {"id": "gb", "name_en": "United Kingdom", "name_es": "Reino Unido", "continent": "Europe", "currency": "GBP", "flag": "🇬🇧"},
    {"id": "de", "name_en": "Germany", "name_es": "Alemania", "continent": "Europe", "currency": "EUR", "flag": "🇩🇪"},
    {"id": "it", "name_en": "Italy", "name_es": "Italia", "continent": "Europe", "currency": "EUR", "flag": "🇮🇹"},
    {"id": "th", "name_en": "Thailand", "name_es": "Tailandia", "continent": "Asia", "currency": "THB", "flag": "🇹🇭"},
    {"id": "br", "name_en": "Brazil", "name_es": "Brasil", "continent": "South America", "currency": "BRL", "flag": "🇧🇷"},
    {"id": "ar", "name_en": "Argentina", "name_es": "Argentina", "continent": "South America", "currency": "ARS", "flag": "🇦🇷"},
    {"id": "co", "name_en": "Colombia", "name_es": "Colombia", "continent": "South America", "currency": "COP", "flag": "🇨🇴"},
    {"id": "au", "name_en": "Australia", "name_es": "Australia", "continent": "Oceania", "currency": "AUD", "flag": "🇦🇺"},
    {"id": "kr", "name_en": "South Korea", "name_es": "Corea del Sur", "continent": "Asia", "currency": "KRW", "flag": "🇰🇷"},
]

INITIAL_OPERATORS = [
    {"id": "es_movistar", "name": "Movistar", "country_id": "es", "technologies": ["4G", "5G"], "website": "www.movistar.es", "coverage": "Excellent"},
    {"id": "es_vodafone", "name": "Vodafone", "country_id": "es", "technologies": ["4G", "5G"], "website": "www.vodafone.es", "coverage": "Very good"},
    {"id": "es_orange", "name": "Orange", "country_id": "es", "technologies": ["4G", "5G"], "website": "www.orange.es", "coverage": "Very good"},
    {"id": "us_tmobile", "name": "T-Mobile", "country_id": "us", "technologies": ["4G", "5G"], "website": "www.t-mobile.com", "coverage": "Excellent in cities"},
    {"id": "us_att", "name": "AT&T", "country_id": "us", "technologies": ["4G", "5G"], "website": "www.att.com", "coverage": "Excellent"},
    {"id": "jp_docomo", "name": "NTT Docomo", "country_id": "jp", "technologies": ["4G", "5G"], "website": "www.docomo.ne.jp", "coverage": "Excellent"},
    {"id": "jp_softbank", "name": "SoftBank", "country_id": "jp", "technologies": ["4G", "5G"], "website": "www.softbank.jp", "coverage": "Very good"},
    {"id": "mx_telcel", "name": "Telcel", "country_id": "mx", "technologies": ["3G", "4G", "5G"], "website": "www.telcel.com", "coverage": "Excellent"},
    {"id": "mx_att", "name": "AT&T México", "country_id": "mx", "technologies": ["4G"], "website": "www.att.com.mx", "coverage": "Good"},
    {"id": "fr_orange", "name": "Orange France", "country_id": "fr", "technologies": ["4G", "5G"], "website": "www.orange.fr", "coverage": "Excellent"},
    {"id": "gb_ee", "name": "EE", "country_id": "gb", "technologies": ["4G", "5G"], "website": "ee.co.uk", "coverage": "Excellent"},
    {"id": "th_ais", "name": "AIS", "country_id": "th", "technologies": ["4G", "5G"], "website": "www.ais.th", "coverage": "Excellent"},
]

INITIAL_PLANS = [
    {"id": "es_mov_tourist", "operator_id": "es_movistar", "name": "Prepago Turista", "data_gb": 20, "price": "15", "currency": "EUR", "validity_days": 28, "sim_type": "Physical", "speed_5g": True, "features": ["Calls to EU", "Roaming EU"]},
    {"id": "es_mov_unl", "operator_id": "es_movistar", "name": "Ilimitada Total", "data_gb": -1, "price": "40", "currency": "EUR", "validity_days": 30, "sim_type": "eSIM", "speed_5g": True, "features": ["Unlimited calls"]},
    {"id": "es_voda_10", "operator_id": "es_vodafone", "name": "Yu 10GB", "data_gb": 10, "price": "10", "currency": "EUR", "validity_days": 30, "sim_type": "Hybrid", "speed_5g": False, "features": ["Social networks free"]},
    {"id": "es_orange_go", "operator_id": "es_orange", "name": "Go Up", "data_gb": 60, "price": "25", "currency": "EUR", "validity_days": 30, "sim_type": "eSIM", "speed_5g": True, "features": []},
    {"id": "us_tmo_tourist", "operator_id": "us_tmobile", "name": "Tourist Plan", "data_gb": 2, "price": "30", "currency": "USD", "validity_days": 21, "sim_type": "Physical", "speed_5g": True, "features": ["1000 minutes"]},
    {"id": "us_tmo_unl", "operator_id": "us_tmobile", "name": "Prepaid Unlimited", "data_gb": -1, "price": "50", "currency": "USD", "validity_days": 30, "sim_type": "eSIM", "speed_5g": True, "features": ["Hotspot 5GB"]},
    {"id": "us_att_15", "operator_id": "us_att", "name": "Prepaid 15GB", "data_gb": 15, "price": "30", "currency": "USD", "validity_days": 30, "sim_type": "Hybrid", "speed_5g": True, "features": []},
    {"id": "jp_docomo_visitor", "operator_id": "jp_docomo", "name": "Japan Welcome SIM", "data_gb": 15, "price": "3000", "currency": "JPY", "validity_days": 30, "sim_type": "eSIM", "speed_5g": False, "features": ["Data only"]},
    {"id": "jp_sb_unl", "operator_id": "jp_softbank", "name": "Prepaid Unlimited", "data_gb": -1, "price": "6500", "currency": "JPY", "validity_days": 15, "sim_type": "Physical", "speed_5g": True, "features": ["Data only"]},
    {"id": "mx_telcel_200", "operator_id": "mx_telcel", "name": "Amigo Sin Límite 200", "data_gb": 3, "price": "200", "currency": "MXN", "validity_days": 30, "sim_type": "Physical", "speed_5g": False, "features": ["Unlimited social networks", "Calls to US/CA"]},
    {"id": "mx_att_unl", "operator_id": "mx_att", "name": "Ilimitado 30 días", "data_gb": -1, "price": "350", "currency": "MXN", "validity_days": 30, "sim_type": "Hybrid", "speed_5g": False, "features": []},
    {"id": "fr_orange_holiday", "operator_id": "fr_orange", "name": "Holiday Europe", "data_gb": 30, "price": "39.99", "currency": "EUR", "validity_days": 14, "sim_type": "Physical", "speed_5g": True, "features": ["Roaming EU", "Calls"]},
    {"id": "gb_ee_pay", "operator_id": "gb_ee", "name": "Pay As You Go Pack", "data_gb": 100, "price": "20", "currency": "GBP", "validity_days": 30, "sim_type": "eSIM", "speed_5g": True, "features": []},
    {"id": "th_ais_tourist", "operator_id": "th_ais", "name": "Traveller SIM", "data_gb": 50, "price": "599", "currency": "THB", "validity_days": 15, "sim_type": "Physical", "speed_5g": True, "features": ["Free WiFi"]},
]

INITIAL_REVIEWS: list[dict] = []

DEFAULT_USER = {
    "name": "Traveler",
    "points": 0,
    "level": "Novice",
    "badges": [],
    "contributions": 0,
    "contributed_countries": [],
    "contributed_plans": 0,
}
