WCIF_FORMAT_VERSION = "1.0"

def competition_wcif(comp) -> dict:
    """WCA Competition Interchange Format document for comp."""
    return {
        "formatVersion": WCIF_FORMAT_VERSION,
        "id": comp.id,
    }
