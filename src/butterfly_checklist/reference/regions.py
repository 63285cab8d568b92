"""Region identifiers for the Distribution table.

Country-level regions (no ``region_name``) get an ISO 3166 identifier built
from their code. Pseudo-regions are not geopolitical areas and have no
standard identifier. The Macaronesian archipelagos and their islands map to
Marine Regions gazetteer records.
"""

ISO_3166_PREFIX = "ISO_3166:"

MARINE_REGIONS_URI = "http://marineregions.org/mrgid/"

# Aggregate regions with no standard code -> display name
PSEUDO_REGIONS: dict[str, str] = {
    "EUR": "Europe",
    "EU28": "European Union",
}

# Archipelago code prefix -> archipelago name used in locality text
ARCHIPELAGOS: dict[str, str] = {
    "MA_AZ": "Azores",
    "MA_CA": "Canary Islands",
    "MA_MD": "Madeira",
}

# Region code -> Marine Regions URI. Exhaustive for the archipelagos above.
# TODO: only MA_AZ_Corvo (2462) is confirmed; every MRGID marked "unverified"
# must be checked against marineregions.org before a release.
MARINE_REGION_URIS: dict[str, str] = {
    # Azores
    "MA_AZ": MARINE_REGIONS_URI + "8367",  # unverified
    "MA_AZ_Corvo": MARINE_REGIONS_URI + "2462",
    "MA_AZ_Faial": MARINE_REGIONS_URI + "2463",  # unverified
    "MA_AZ_Flores": MARINE_REGIONS_URI + "2464",  # unverified
    "MA_AZ_Graciosa": MARINE_REGIONS_URI + "2465",  # unverified
    "MA_AZ_Pico": MARINE_REGIONS_URI + "2466",  # unverified
    "MA_AZ_SantaMaria": MARINE_REGIONS_URI + "2467",  # unverified
    "MA_AZ_SaoJorge": MARINE_REGIONS_URI + "2468",  # unverified
    "MA_AZ_SaoMiguel": MARINE_REGIONS_URI + "2469",  # unverified
    "MA_AZ_Terceira": MARINE_REGIONS_URI + "2470",  # unverified
    # Canary Islands
    "MA_CA": MARINE_REGIONS_URI + "8368",  # unverified
    "MA_CA_ElHierro": MARINE_REGIONS_URI + "2474",  # unverified
    "MA_CA_Fuerteventura": MARINE_REGIONS_URI + "2475",  # unverified
    "MA_CA_GranCanaria": MARINE_REGIONS_URI + "2476",  # unverified
    "MA_CA_LaGomera": MARINE_REGIONS_URI + "2477",  # unverified
    "MA_CA_LaPalma": MARINE_REGIONS_URI + "2478",  # unverified
    "MA_CA_Lanzarote": MARINE_REGIONS_URI + "2479",  # unverified
    "MA_CA_Tenerife": MARINE_REGIONS_URI + "2480",  # unverified
    # Madeira
    "MA_MD": MARINE_REGIONS_URI + "8366",  # unverified
    "MA_MD_Desertas": MARINE_REGIONS_URI + "2471",  # unverified
    "MA_MD_Madeira": MARINE_REGIONS_URI + "2472",  # unverified
    "MA_MD_PortoSanto": MARINE_REGIONS_URI + "2473",  # unverified
    "MA_MD_Selvagens": MARINE_REGIONS_URI + "2481",  # unverified
}


def archipelago_of(region_code: str) -> str | None:
    """Return the archipelago name if ``region_code`` is one of its islands."""
    prefix, sep, island = region_code.rpartition("_")
    if sep and island and prefix in ARCHIPELAGOS:
        return ARCHIPELAGOS[prefix]
    return None
