AMERICAN_TO_BRITISH_TITLES = {
    "mr.": "mr",
    "mrs.": "mrs",
    "ms.": "ms",
    "mx.": "mx",
    "dr.": "dr",
    "prof.": "prof",
}
