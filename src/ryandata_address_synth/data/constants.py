"""Centralized constants for the bundled en-US dataset.

Directions, street vocabulary, secondary unit descriptors and street
patterns. State and city records live in the bundled ``us_cities.csv``.
"""

from __future__ import annotations

COUNTRY_CODE = "US"

# Fixed order: the generator indexes these tables by position
CARDINAL_DIRECTIONS: list[dict[str, str]] = [
    {"name": "North", "abbreviation": "N"},
    {"name": "East", "abbreviation": "E"},
    {"name": "South", "abbreviation": "S"},
    {"name": "West", "abbreviation": "W"},
]

INTERCARDINAL_DIRECTIONS: list[dict[str, str]] = [
    {"name": "Northeast", "abbreviation": "NE"},
    {"name": "Southeast", "abbreviation": "SE"},
    {"name": "Southwest", "abbreviation": "SW"},
    {"name": "Northwest", "abbreviation": "NW"},
]

# Street descriptor (suffix) name -> USPS abbreviation, per category
STREET_DESCRIPTORS: dict[str, dict[str, str]] = {
    "general": {
        "Street": "St",
        "Avenue": "Ave",
        "Road": "Rd",
        "Drive": "Dr",
        "Lane": "Ln",
        "Boulevard": "Blvd",
        "Way": "Way",
        "Place": "Pl",
        "Terrace": "Ter",
        "Trail": "Trl",
    },
    "size": {
        "Alley": "Aly",
        "Court": "Ct",
        "Circle": "Cir",
        "Cove": "Cv",
        "Highway": "Hwy",
        "Expressway": "Expy",
        "Freeway": "Fwy",
        "Parkway": "Pkwy",
    },
    "function": {
        "Plaza": "Plz",
        "Square": "Sq",
        "Crossing": "Xing",
        "Bypass": "Byp",
        "Pike": "Pike",
        "Turnpike": "Tpke",
        "Causeway": "Cswy",
        "Walk": "Walk",
        "Mall": "Mall",
    },
}

SECONDARY_DESCRIPTORS: dict[str, list[str]] = {
    "residential": ["Apt.", "Unit", "Lot", "Trlr.", "Bldg.", "#"],
    "commercial": ["Suite", "Ste.", "Dept.", "Fl.", "Rm.", "Hngr.", "Pier"],
}

STREET_NAMES: list[str] = [
    "Adams",
    "Ash",
    "Aspen",
    "Bay",
    "Birch",
    "Broad",
    "Canyon",
    "Cedar",
    "Center",
    "Cherry",
    "Church",
    "College",
    "Cottonwood",
    "Cypress",
    "Dogwood",
    "Elm",
    "Forest",
    "Franklin",
    "Garden",
    "Highland",
    "Hickory",
    "Hill",
    "Jackson",
    "Jefferson",
    "Johnson",
    "Lake",
    "Laurel",
    "Lincoln",
    "Madison",
    "Magnolia",
    "Main",
    "Maple",
    "Meadow",
    "Mill",
    "Monroe",
    "Oak",
    "Orchard",
    "Park",
    "Pine",
    "Pleasant",
    "Prospect",
    "Railroad",
    "Ridge",
    "River",
    "Spring",
    "Spruce",
    "Sunset",
    "Sycamore",
    "Valley",
    "View",
    "Walnut",
    "Washington",
    "Willow",
    "Wilson",
]

# Tokens: {ord} ordinal number, {street} street name, {descriptor} street
# suffix, {dir} direction. Tokens may repeat within one pattern.
STREET_PATTERNS: list[str] = [
    "{street} {descriptor}",
    "{dir} {street} {descriptor}",
    "{street} {descriptor} {dir}",
    "{ord} {descriptor}",
    "{dir} {ord} {descriptor}",
    "{ord} {descriptor} {dir}",
    "{street} {street} {descriptor}",
    "{dir} {street} {descriptor} {dir}",
]

# State name to abbreviation mapping (lowercase name -> abbreviation)
# Includes all 50 US states plus District of Columbia
STATE_NAME_TO_ABBREV: dict[str, str] = {
    "alabama": "AL",
    "alaska": "AK",
    "arizona": "AZ",
    "arkansas": "AR",
    "california": "CA",
    "colorado": "CO",
    "connecticut": "CT",
    "delaware": "DE",
    "florida": "FL",
    "georgia": "GA",
    "hawaii": "HI",
    "idaho": "ID",
    "illinois": "IL",
    "indiana": "IN",
    "iowa": "IA",
    "kansas": "KS",
    "kentucky": "KY",
    "louisiana": "LA",
    "maine": "ME",
    "maryland": "MD",
    "massachusetts": "MA",
    "michigan": "MI",
    "minnesota": "MN",
    "mississippi": "MS",
    "missouri": "MO",
    "montana": "MT",
    "nebraska": "NE",
    "nevada": "NV",
    "new hampshire": "NH",
    "new jersey": "NJ",
    "new mexico": "NM",
    "new york": "NY",
    "north carolina": "NC",
    "north dakota": "ND",
    "ohio": "OH",
    "oklahoma": "OK",
    "oregon": "OR",
    "pennsylvania": "PA",
    "rhode island": "RI",
    "south carolina": "SC",
    "south dakota": "SD",
    "tennessee": "TN",
    "texas": "TX",
    "utah": "UT",
    "vermont": "VT",
    "virginia": "VA",
    "washington": "WA",
    "west virginia": "WV",
    "wisconsin": "WI",
    "wyoming": "WY",
    "district of columbia": "DC",
}
