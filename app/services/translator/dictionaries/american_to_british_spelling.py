# American to British spelling pairs. British to American is derived by inversion,
# so every British spelling must appear exactly once.
AMERICAN_TO_BRITISH_SPELLING = {
    # -or -> -our
    "color": "colour",
    "colors": "colours",
    "colored": "coloured",
    "colorful": "colourful",
    "favor": "favour",
    "favorite": "favourite",
    "favorites": "favourites",
    "flavor": "flavour",
    "flavors": "flavours",
    "honor": "honour",
    "honors": "honours",
    "humor": "humour",
    "labor": "labour",
    "neighbor": "neighbour",
    "neighbors": "neighbours",
    "neighborhood": "neighbourhood",
    "rumor": "rumour",
    "behavior": "behaviour",
    "behavioral": "behavioural",
    "endeavor": "endeavour",
    # -ize / -yze -> -ise / -yse
    "analyze": "analyse",
    "analyzed": "analysed",
    "apologize": "apologise",
    "caramelize": "caramelise",
    "caramelized": "caramelised",
    "emphasize": "emphasise",
    "emphasized": "emphasised",
    "emphasizes": "emphasises",
    "emphasizing": "emphasising",
    "organize": "organise",
    "organized": "organised",
    "organization": "organisation",
    "organizations": "organisations",
    "organizational": "organisational",
    "optimization": "optimisation",
    "paralyze": "paralyse",
    "prioritize": "prioritise",
    "realize": "realise",
    "realized": "realised",
    "recognize": "recognise",
    "summarize": "summarise",
    "summarizing": "summarising",
    # -er -> -re
    "center": "centre",
    "centers": "centres",
    "fiber": "fibre",
    "liter": "litre",
    "meter": "metre",
    "theater": "theatre",
    "theaters": "theatres",
    # -ense -> -ence
    "defense": "defence",
    "offense": "offence",
    "pretense": "pretence",
    # -og -> -ogue
    "catalog": "catalogue",
    "dialog": "dialogue",
    "analog": "analogue",
    # doubled consonants
    "traveler": "traveller",
    "traveling": "travelling",
    "traveled": "travelled",
    "modeling": "modelling",
    "labeled": "labelled",
    "jewelry": "jewellery",
    # misc
    "aluminum": "aluminium",
    "cozy": "cosy",
    "curb": "kerb",
    "gray": "grey",
    "mom": "mum",
    "moms": "mums",
    "mustache": "moustache",
    "pajamas": "pyjamas",
    "plow": "plough",
    "program": "programme",
    "programs": "programmes",
    "skeptical": "sceptical",
    "tire": "tyre",
    "tires": "tyres",
    "yogurt": "yoghurt",
}
