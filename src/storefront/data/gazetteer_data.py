"""Curated city coordinates used to build the default gazetteer.

Rows are ``(city, state_code, latitude, longitude)``. Coordinates are city
centres; this is a fixed list of major US cities, not a general geocoder.
"""

from __future__ import annotations

STATE_CODES: dict[str, str] = {
    "alabama": "al",
    "alaska": "ak",
    "arizona": "az",
    "arkansas": "ar",
    "california": "ca",
    "colorado": "co",
    "connecticut": "ct",
    "delaware": "de",
    "district of columbia": "dc",
    "florida": "fl",
    "georgia": "ga",
    "hawaii": "hi",
    "idaho": "id",
    "illinois": "il",
    "indiana": "in",
    "iowa": "ia",
    "kansas": "ks",
    "kentucky": "ky",
    "louisiana": "la",
    "maine": "me",
    "maryland": "md",
    "massachusetts": "ma",
    "michigan": "mi",
    "minnesota": "mn",
    "mississippi": "ms",
    "missouri": "mo",
    "montana": "mt",
    "nebraska": "ne",
    "nevada": "nv",
    "new hampshire": "nh",
    "new jersey": "nj",
    "new mexico": "nm",
    "new york": "ny",
    "north carolina": "nc",
    "north dakota": "nd",
    "ohio": "oh",
    "oklahoma": "ok",
    "oregon": "or",
    "pennsylvania": "pa",
    "rhode island": "ri",
    "south carolina": "sc",
    "south dakota": "sd",
    "tennessee": "tn",
    "texas": "tx",
    "utah": "ut",
    "vermont": "vt",
    "virginia": "va",
    "washington": "wa",
    "west virginia": "wv",
    "wisconsin": "wi",
    "wyoming": "wy",
}

US_CITIES: tuple[tuple[str, str, float, float], ...] = (
    # Northeast
    ("New York", "NY", 40.7128, -74.0060),
    ("Brooklyn", "NY", 40.6782, -73.9442),
    ("Buffalo", "NY", 42.8864, -78.8784),
    ("Rochester", "NY", 43.1566, -77.6088),
    ("Yonkers", "NY", 40.9312, -73.8988),
    ("Syracuse", "NY", 43.0481, -76.1474),
    ("Albany", "NY", 42.6526, -73.7562),
    ("Newark", "NJ", 40.7357, -74.1724),
    ("Jersey City", "NJ", 40.7178, -74.0431),
    ("Philadelphia", "PA", 39.9526, -75.1652),
    ("Pittsburgh", "PA", 40.4406, -79.9959),
    ("Allentown", "PA", 40.6084, -75.4902),
    ("Boston", "MA", 42.3601, -71.0589),
    ("Worcester", "MA", 42.2626, -71.8023),
    ("Springfield", "MA", 42.1015, -72.5898),
    ("Cambridge", "MA", 42.3736, -71.1097),
    ("Providence", "RI", 41.8240, -71.4128),
    ("Hartford", "CT", 41.7658, -72.6734),
    ("New Haven", "CT", 41.3083, -72.9279),
    ("Bridgeport", "CT", 41.1865, -73.1952),
    ("Manchester", "NH", 42.9956, -71.4548),
    ("Portland", "ME", 43.6591, -70.2568),
    ("Burlington", "VT", 44.4759, -73.2121),
    # Mid-Atlantic and Southeast
    ("Washington", "DC", 38.9072, -77.0369),
    ("Baltimore", "MD", 39.2904, -76.6122),
    ("Wilmington", "DE", 39.7391, -75.5398),
    ("Dover", "DE", 39.1582, -75.5244),
    ("Virginia Beach", "VA", 36.8529, -75.9780),
    ("Norfolk", "VA", 36.8508, -76.2859),
    ("Chesapeake", "VA", 36.7682, -76.2875),
    ("Richmond", "VA", 37.5407, -77.4360),
    ("Arlington", "VA", 38.8816, -77.0910),
    ("Charleston", "WV", 38.3498, -81.6326),
    ("Charlotte", "NC", 35.2271, -80.8431),
    ("Raleigh", "NC", 35.7796, -78.6382),
    ("Greensboro", "NC", 36.0726, -79.7920),
    ("Durham", "NC", 35.9940, -78.8986),
    ("Wilmington", "NC", 34.2257, -77.9447),
    ("Fayetteville", "NC", 35.0527, -78.8784),
    ("Charleston", "SC", 32.7765, -79.9311),
    ("Columbia", "SC", 34.0007, -81.0348),
    ("Atlanta", "GA", 33.7490, -84.3880),
    ("Savannah", "GA", 32.0809, -81.0912),
    ("Augusta", "GA", 33.4735, -82.0105),
    ("Columbus", "GA", 32.4610, -84.9877),
    ("Jacksonville", "FL", 30.3322, -81.6557),
    ("Miami", "FL", 25.7617, -80.1918),
    ("Hialeah", "FL", 25.8576, -80.2781),
    ("Fort Lauderdale", "FL", 26.1224, -80.1373),
    ("Tampa", "FL", 27.9506, -82.4572),
    ("St. Petersburg", "FL", 27.7676, -82.6403),
    ("Orlando", "FL", 28.5383, -81.3792),
    ("Tallahassee", "FL", 30.4383, -84.2807),
    ("Birmingham", "AL", 33.5186, -86.8104),
    ("Montgomery", "AL", 32.3792, -86.3077),
    ("Huntsville", "AL", 34.7304, -86.5861),
    ("Mobile", "AL", 30.6954, -88.0399),
    ("Jackson", "MS", 32.2988, -90.1848),
    ("Nashville", "TN", 36.1627, -86.7816),
    ("Memphis", "TN", 35.1495, -90.0490),
    ("Knoxville", "TN", 35.9606, -83.9207),
    ("Chattanooga", "TN", 35.0456, -85.3097),
    ("Louisville", "KY", 38.2527, -85.7585),
    ("Lexington", "KY", 38.0406, -84.5037),
    ("New Orleans", "LA", 29.9511, -90.0715),
    ("Baton Rouge", "LA", 30.4515, -91.1871),
    ("Shreveport", "LA", 32.5252, -93.7502),
    ("Lafayette", "LA", 30.2241, -92.0198),
    ("Little Rock", "AR", 34.7465, -92.2896),
    ("Fayetteville", "AR", 36.0626, -94.1574),
    # Midwest
    ("Chicago", "IL", 41.8781, -87.6298),
    ("Springfield", "IL", 39.7817, -89.6501),
    ("Aurora", "IL", 41.7606, -88.3201),
    ("Naperville", "IL", 41.7508, -88.1535),
    ("Rockford", "IL", 42.2711, -89.0940),
    ("Peoria", "IL", 40.6936, -89.5890),
    ("Indianapolis", "IN", 39.7684, -86.1581),
    ("Fort Wayne", "IN", 41.0793, -85.1394),
    ("Evansville", "IN", 37.9716, -87.5711),
    ("Lafayette", "IN", 40.4167, -86.8753),
    ("Columbus", "OH", 39.9612, -82.9988),
    ("Cleveland", "OH", 41.4993, -81.6944),
    ("Cincinnati", "OH", 39.1031, -84.5120),
    ("Toledo", "OH", 41.6528, -83.5379),
    ("Akron", "OH", 41.0814, -81.5190),
    ("Detroit", "MI", 42.3314, -83.0458),
    ("Grand Rapids", "MI", 42.9634, -85.6681),
    ("Ann Arbor", "MI", 42.2808, -83.7430),
    ("Lansing", "MI", 42.7325, -84.5555),
    ("Milwaukee", "WI", 43.0389, -87.9065),
    ("Madison", "WI", 43.0731, -89.4012),
    ("Green Bay", "WI", 44.5133, -88.0133),
    ("Minneapolis", "MN", 44.9778, -93.2650),
    ("Saint Paul", "MN", 44.9537, -93.0900),
    ("Rochester", "MN", 44.0121, -92.4802),
    ("Des Moines", "IA", 41.5868, -93.6250),
    ("Cedar Rapids", "IA", 41.9779, -91.6656),
    ("Kansas City", "MO", 39.0997, -94.5786),
    ("St. Louis", "MO", 38.6270, -90.1994),
    ("Springfield", "MO", 37.2090, -93.2923),
    ("Kansas City", "KS", 39.1142, -94.6275),
    ("Wichita", "KS", 37.6872, -97.3301),
    ("Topeka", "KS", 39.0473, -95.6752),
    ("Overland Park", "KS", 38.9822, -94.6708),
    ("Omaha", "NE", 41.2565, -95.9345),
    ("Lincoln", "NE", 40.8136, -96.7026),
    ("Fargo", "ND", 46.8772, -96.7898),
    ("Sioux Falls", "SD", 43.5446, -96.7311),
    # South central
    ("Houston", "TX", 29.7604, -95.3698),
    ("San Antonio", "TX", 29.4241, -98.4936),
    ("Dallas", "TX", 32.7767, -96.7970),
    ("Austin", "TX", 30.2672, -97.7431),
    ("Fort Worth", "TX", 32.7555, -97.3308),
    ("El Paso", "TX", 31.7619, -106.4850),
    ("Arlington", "TX", 32.7357, -97.1081),
    ("Corpus Christi", "TX", 27.8006, -97.3964),
    ("Plano", "TX", 33.0198, -96.6989),
    ("Laredo", "TX", 27.5306, -99.4803),
    ("Lubbock", "TX", 33.5779, -101.8552),
    ("Pasadena", "TX", 29.6911, -95.2091),
    ("Oklahoma City", "OK", 35.4676, -97.5164),
    ("Tulsa", "OK", 36.1540, -95.9928),
    # Mountain
    ("Denver", "CO", 39.7392, -104.9903),
    ("Colorado Springs", "CO", 38.8339, -104.8214),
    ("Aurora", "CO", 39.7294, -104.8319),
    ("Boulder", "CO", 40.0150, -105.2705),
    ("Albuquerque", "NM", 35.0844, -106.6504),
    ("Santa Fe", "NM", 35.6870, -105.9378),
    ("Phoenix", "AZ", 33.4484, -112.0740),
    ("Tucson", "AZ", 32.2226, -110.9747),
    ("Mesa", "AZ", 33.4152, -111.8315),
    ("Chandler", "AZ", 33.3062, -111.8413),
    ("Scottsdale", "AZ", 33.4942, -111.9261),
    ("Glendale", "AZ", 33.5387, -112.1860),
    ("Tempe", "AZ", 33.4255, -111.9400),
    ("Peoria", "AZ", 33.5806, -112.2374),
    ("Las Vegas", "NV", 36.1699, -115.1398),
    ("Henderson", "NV", 36.0395, -114.9817),
    ("Reno", "NV", 39.5296, -119.8138),
    ("Salt Lake City", "UT", 40.7608, -111.8910),
    ("Provo", "UT", 40.2338, -111.6585),
    ("Boise", "ID", 43.6150, -116.2023),
    ("Billings", "MT", 45.7833, -108.5007),
    ("Cheyenne", "WY", 41.1400, -104.8202),
    # Pacific
    ("Los Angeles", "CA", 34.0522, -118.2437),
    ("Beverly Hills", "CA", 34.0736, -118.4004),
    ("San Diego", "CA", 32.7157, -117.1611),
    ("San Jose", "CA", 37.3382, -121.8863),
    ("San Francisco", "CA", 37.7749, -122.4194),
    ("Oakland", "CA", 37.8044, -122.2712),
    ("Richmond", "CA", 37.9358, -122.3477),
    ("Fresno", "CA", 36.7378, -119.7871),
    ("Sacramento", "CA", 38.5816, -121.4944),
    ("Long Beach", "CA", 33.7701, -118.1937),
    ("Bakersfield", "CA", 35.3733, -119.0187),
    ("Anaheim", "CA", 33.8366, -117.9143),
    ("Santa Ana", "CA", 33.7455, -117.8677),
    ("Riverside", "CA", 33.9533, -117.3962),
    ("Irvine", "CA", 33.6846, -117.8265),
    ("Glendale", "CA", 34.1425, -118.2551),
    ("Pasadena", "CA", 34.1478, -118.1445),
    ("Portland", "OR", 45.5152, -122.6784),
    ("Eugene", "OR", 44.0521, -123.0868),
    ("Salem", "OR", 44.9429, -123.0351),
    ("Seattle", "WA", 47.6062, -122.3321),
    ("Spokane", "WA", 47.6588, -117.4260),
    ("Tacoma", "WA", 47.2529, -122.4443),
    ("Vancouver", "WA", 45.6387, -122.6615),
    ("Bellevue", "WA", 47.6101, -122.2015),
    ("Anchorage", "AK", 61.2181, -149.9003),
    ("Honolulu", "HI", 21.3069, -157.8583),
)
