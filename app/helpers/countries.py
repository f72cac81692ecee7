from app.extensions import db
from app.models import Country

# (WCA country id, display name, ISO-3166 alpha-2, continent id)
COUNTRIES = [
    ("Argentina", "Argentina", "AR", "_South America"),
    ("Australia", "Australia", "AU", "_Oceania"),
    ("Austria", "Austria", "AT", "_Europe"),
    ("Belarus", "Belarus", "BY", "_Europe"),
    ("Belgium", "Belgium", "BE", "_Europe"),
    ("Bolivia", "Bolivia", "BO", "_South America"),
    ("Bosnia and Herzegovina", "Bosnia and Herzegovina", "BA", "_Europe"),
    ("Brazil", "Brazil", "BR", "_South America"),
    ("Bulgaria", "Bulgaria", "BG", "_Europe"),
    ("Canada", "Canada", "CA", "_North America"),
    ("Chile", "Chile", "CL", "_South America"),
    ("China", "China", "CN", "_Asia"),
    ("Colombia", "Colombia", "CO", "_South America"),
    ("Costa Rica", "Costa Rica", "CR", "_North America"),
    ("Croatia", "Croatia", "HR", "_Europe"),
    ("Czech Republic", "Czech Republic", "CZ", "_Europe"),
    ("Denmark", "Denmark", "DK", "_Europe"),
    ("Dominican Republic", "Dominican Republic", "DO", "_North America"),
    ("Ecuador", "Ecuador", "EC", "_South America"),
    ("Egypt", "Egypt", "EG", "_Africa"),
    ("Estonia", "Estonia", "EE", "_Europe"),
    ("Finland", "Finland", "FI", "_Europe"),
    ("France", "France", "FR", "_Europe"),
    ("Georgia", "Georgia", "GE", "_Europe"),
    ("Germany", "Germany", "DE", "_Europe"),
    ("Greece", "Greece", "GR", "_Europe"),
    ("Guatemala", "Guatemala", "GT", "_North America"),
    ("Hong Kong", "Hong Kong", "HK", "_Asia"),
    ("Hungary", "Hungary", "HU", "_Europe"),
    ("Iceland", "Iceland", "IS", "_Europe"),
    ("India", "India", "IN", "_Asia"),
    ("Indonesia", "Indonesia", "ID", "_Asia"),
    ("Iran", "Iran", "IR", "_Asia"),
    ("Ireland", "Ireland", "IE", "_Europe"),
    ("Israel", "Israel", "IL", "_Asia"),
    ("Italy", "Italy", "IT", "_Europe"),
    ("Japan", "Japan", "JP", "_Asia"),
    ("Kazakhstan", "Kazakhstan", "KZ", "_Asia"),
    ("Kenya", "Kenya", "KE", "_Africa"),
    ("Korea", "Republic of Korea", "KR", "_Asia"),
    ("Latvia", "Latvia", "LV", "_Europe"),
    ("Lithuania", "Lithuania", "LT", "_Europe"),
    ("Malaysia", "Malaysia", "MY", "_Asia"),
    ("Mexico", "Mexico", "MX", "_North America"),
    ("Mongolia", "Mongolia", "MN", "_Asia"),
    ("Morocco", "Morocco", "MA", "_Africa"),
    ("Netherlands", "Netherlands", "NL", "_Europe"),
    ("New Zealand", "New Zealand", "NZ", "_Oceania"),
    ("Nigeria", "Nigeria", "NG", "_Africa"),
    ("Norway", "Norway", "NO", "_Europe"),
    ("Pakistan", "Pakistan", "PK", "_Asia"),
    ("Panama", "Panama", "PA", "_North America"),
    ("Paraguay", "Paraguay", "PY", "_South America"),
    ("Peru", "Peru", "PE", "_South America"),
    ("Philippines", "Philippines", "PH", "_Asia"),
    ("Poland", "Poland", "PL", "_Europe"),
    ("Portugal", "Portugal", "PT", "_Europe"),
    ("Romania", "Romania", "RO", "_Europe"),
    ("Russia", "Russia", "RU", "_Europe"),
    ("Serbia", "Serbia", "RS", "_Europe"),
    ("Singapore", "Singapore", "SG", "_Asia"),
    ("Slovakia", "Slovakia", "SK", "_Europe"),
    ("Slovenia", "Slovenia", "SI", "_Europe"),
    ("South Africa", "South Africa", "ZA", "_Africa"),
    ("Spain", "Spain", "ES", "_Europe"),
    ("Sweden", "Sweden", "SE", "_Europe"),
    ("Switzerland", "Switzerland", "CH", "_Europe"),
    ("Taiwan", "Chinese Taipei", "TW", "_Asia"),
    ("Thailand", "Thailand", "TH", "_Asia"),
    ("Turkey", "Turkey", "TR", "_Europe"),
    ("Ukraine", "Ukraine", "UA", "_Europe"),
    ("United Kingdom", "United Kingdom", "GB", "_Europe"),
    ("Uruguay", "Uruguay", "UY", "_South America"),
    ("USA", "United States", "US", "_North America"),
    ("Venezuela", "Venezuela", "VE", "_South America"),
    ("Vietnam", "Vietnam", "VN", "_Asia"),
]


def seed_countries() -> int:
    """Insert any missing countries. Returns how many were added."""
    existing = {c.id for c in Country.query.all()}

    added = 0
    for country_id, name, iso2, continent_id in COUNTRIES:
        if country_id in existing:
            continue
        db.session.add(Country(id=country_id, name=name, iso2=iso2, continent_id=continent_id))
        added += 1

    db.session.commit()
    return added
