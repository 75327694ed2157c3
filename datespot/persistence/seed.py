"""Initial spots loaded into an empty store."""

from datespot.domain.model import Spot
from datespot.persistence.mappers import document_to_spot

SEED_CREATED_AT = "2024-01-15T00:00:00+00:00"

INITIAL_SPOT_RECORDS: dict[str, dict] = {
    "1": {
        "name": "Liseberg",
        "location": "Örgrytevägen 5, Göteborg",
        "category": "entertainment",
        "priceLevel": 3,
        "description": "Scandinavia's largest amusement park with thrilling roller coasters and beautiful gardens. Pro tip: Download their app for virtual queues!",
        "rating": 4.0,
        "tags": ["Amusement Park", "Rides", "Family-Friendly"],
        "imageUrl": "https://t3.ftcdn.net/jpg/05/00/57/98/360_F_500579853_iUtfSMCiOp2dgaTmgGyZbzIMHfUWvC4r.jpg",
        "petFriendly": False,
        "coordinates": {"lat": 57.69538532530327, "lng": 11.992507026982514},
    },
    "2": {
        "name": "Slottsskogen",
        "location": "Linnéstaden, Göteborg",
        "category": "outdoor",
        "priceLevel": 1,
        "description": "Beautiful park perfect for picnics, walking, and visiting the free zoo with Nordic animals. A former deer-hunting ground transformed into a picturesque urban oasis.",
        "rating": 4.5,
        "tags": ["Park", "Zoo", "Nature"],
        "imageUrl": "https://cms.goteborg.com/uploads/2020/12/slottsskogen-promenad-43.jpg",
        "petFriendly": True,
        "coordinates": {"lat": 57.68459262015389, "lng": 11.944461376143918},
    },
    "3": {
        "name": "Haga Nygata",
        "location": "Haga, Göteborg",
        "category": "romantic",
        "priceLevel": 2,
        "description": "Charming cobblestone street with historic wooden houses, cozy cafés, and boutique shops. Perfect for a romantic stroll.",
        "rating": 4.2,
        "tags": ["Historic Walking Area", "Shopping", "Cafes"],
        "imageUrl": "https://cms.goteborg.com/uploads/2020/12/Haga_House-of-Vision_2309_04-scaled.jpg",
        "petFriendly": True,
        "coordinates": {"lat": 57.6985384, "lng": 11.9519311},
    },
    "4": {
        "name": "The Garden Society (Trädgårdsföreningen)",
        "location": "Centrum, Göteborg",
        "category": "outdoor",
        "priceLevel": 1,
        "description": "Historic garden park with palm house, rose garden, and peaceful walking paths. One of Europe's larger botanical gardens.",
        "rating": 4.5,
        "tags": ["Gardens", "Botanical", "Relaxing"],
        "petFriendly": True,
        "coordinates": {"lat": 57.706466354857305, "lng": 11.976423265038605},
    },
    "5": {
        "name": "Paddan Canal Tours",
        "location": "Stenpiren, Göteborg",
        "category": "water",
        "priceLevel": 2,
        "description": "Guided boat tours through the canals and under bridges of Gothenburg. Great way to see the city from a different perspective!",
        "rating": 4.6,
        "tags": ["Boat Tour", "Canal", "Sightseeing"],
        "petFriendly": False,
        "coordinates": {"lat": 57.70377425750224, "lng": 11.970010467511406},
    },
    "6": {
        "name": "Upper House Spa",
        "location": "Brunnsparken, Göteborg",
        "category": "romantic",
        "priceLevel": 4,
        "description": "Luxury spa with panoramic views from the top of Gothia Towers. Perfect for a special occasion or treat yourself moment.",
        "rating": 4.5,
        "tags": ["Spa", "Luxury", "Relaxation"],
        "petFriendly": False,
        "coordinates": {"lat": 57.69747828433729, "lng": 11.988963013621454},
    },
    "7": {
        "name": "Gothenburg Botanical Garden",
        "location": "Änggårdsbergen, Göteborg",
        "category": "outdoor",
        "priceLevel": 2,
        "description": "One of Europe's larger botanical gardens with 16,000 plant species. Beautiful any time of year!",
        "rating": 4.3,
        "tags": ["Botanical Garden", "Nature", "Plants"],
        "petFriendly": True,
        "coordinates": {"lat": 57.682950855202265, "lng": 11.950344819768201},
    },
    "8": {
        "name": "Sjömanstornet",
        "location": "Majorna, Göteborg",
        "category": "view",
        "priceLevel": 1,
        "description": "Observation tower offering panoramic views over Gothenburg and the archipelago. Great for sunset views!",
        "rating": 4.6,
        "tags": ["Observation Tower", "Viewpoint", "Panoramic"],
        "petFriendly": True,
        "coordinates": {"lat": 57.69956727968238, "lng": 11.932173515992389},
    },
    "10": {
        "name": "Bord 27",
        "location": "Göteborg City",
        "category": "food",
        "priceLevel": 3,
        "description": "European and Swedish cuisine with a modern twist. Cozy atmosphere for intimate conversations.",
        "rating": 4.8,
        "tags": ["European", "Swedish", "Modern"],
        "petFriendly": False,
        "coordinates": {"lat": 57.697285283550336, "lng": 11.962909268748772},
    },
    "11": {
        "name": "Heaven 23",
        "location": "Gothia Towers, Göteborg",
        "category": "food",
        "priceLevel": 4,
        "description": "Restaurant with panoramic views from the 23rd floor. Perfect for a romantic evening with a view!",
        "rating": 4.1,
        "tags": ["View Restaurant", "Panoramic", "Fine Dining"],
        "petFriendly": False,
        "coordinates": {"lat": 57.69762375015898, "lng": 11.988522435896453},
    },
    "13": {
        "name": "Avenyn",
        "location": "Göteborg City",
        "category": "romantic",
        "priceLevel": 2,
        "description": "Göteborg's most famous boulevard, lined with shops, restaurants, and cultural venues. Great for an evening stroll.",
        "rating": 4.2,
        "tags": ["Boulevard", "Shopping", "Dining"],
        "petFriendly": True,
        "coordinates": {"lat": 57.70073940412776, "lng": 11.974809208891156},
    },
    "14": {
        "name": "Vinga",
        "location": "Gothenburg Archipelago",
        "category": "outdoor",
        "priceLevel": 2,
        "description": "Beautiful island in the archipelago, birthplace of Swedish poet Evert Taube. Take a ferry for a day trip adventure!",
        "rating": 4.6,
        "tags": ["Island", "Archipelago", "Nature"],
        "petFriendly": True,
        "coordinates": {"lat": 57.635100343961405, "lng": 11.607401414737499},
    },
    "15": {
        "name": "Champagnebaren",
        "location": "Göteborg City",
        "category": "romantic",
        "priceLevel": 3,
        "description": "Elegant champagne bar perfect for a romantic evening. Great for celebrations or just because!",
        "rating": 4.2,
        "tags": ["Bar", "European", "Romantic"],
        "petFriendly": False,
        "coordinates": {"lat": 57.704437493052176, "lng": 11.96301539434193},
    },
}


def initial_spots() -> list[Spot]:
    """Seed spots as domain models, with counters at their defaults."""
    return [
        document_to_spot(doc_id, {**record, "createdAt": SEED_CREATED_AT})
        for doc_id, record in INITIAL_SPOT_RECORDS.items()
    ]
