"""Bundled mock catalog — the demo inventory served when no supplier feed is wired in."""

FLIGHTS: list[dict] = [
    {
        "id": "FL001",
        "airline": "American Airlines",
        "flight_number": "AA100",
        "departure": {"airport": "JFK", "city": "New York", "country": "USA", "date": "2024-02-15T08:00:00Z", "terminal": "4"},
        "arrival": {"airport": "LAX", "city": "Los Angeles", "country": "USA", "date": "2024-02-15T11:30:00Z", "terminal": "7"},
        "duration": "5h 30m",
        "aircraft": "Boeing 737",
        "price": 299.99,
        "currency": "USD",
        "available_seats": 45,
        "flight_class": "economy",
        "baggage": {"carry": "1 x 10kg", "checked": "1 x 23kg"},
    },
    {
        "id": "FL002",
        "airline": "Delta Air Lines",
        "flight_number": "DL200",
        "departure": {"airport": "LAX", "city": "Los Angeles", "country": "USA", "date": "2024-02-16T14:15:00Z", "terminal": "2"},
        "arrival": {"airport": "JFK", "city": "New York", "country": "USA", "date": "2024-02-16T22:45:00Z", "terminal": "4"},
        "duration": "5h 30m",
        "aircraft": "Airbus A320",
        "price": 349.99,
        "currency": "USD",
        "available_seats": 23,
        "flight_class": "economy",
        "baggage": {"carry": "1 x 10kg", "checked": "1 x 23kg"},
    },
    {
        "id": "FL003",
        "airline": "United Airlines",
        "flight_number": "UA300",
        "departure": {"airport": "ORD", "city": "Chicago", "country": "USA", "date": "2024-02-17T09:30:00Z", "terminal": "1"},
        "arrival": {"airport": "LHR", "city": "London", "country": "UK", "date": "2024-02-17T21:00:00Z", "terminal": "5"},
        "duration": "8h 30m",
        "aircraft": "Boeing 787",
        "price": 899.99,
        "currency": "USD",
        "available_seats": 67,
        "flight_class": "business",
        "baggage": {"carry": "2 x 10kg", "checked": "2 x 32kg"},
    },
]

HOTELS: list[dict] = [
    {
        "id": "HTL001",
        "name": "Grand Plaza Hotel",
        "location": {
            "address": "123 Main Street",
            "city": "New York",
            "country": "USA",
            "coordinates": {"lat": 40.7128, "lng": -74.0060},
        },
        "rating": 4.5,
        "images": ["https://example.com/hotel1-1.jpg", "https://example.com/hotel1-2.jpg"],
        "amenities": ["WiFi", "Pool", "Gym", "Restaurant", "Bar", "Spa"],
        "room_types": [
            {
                "type": "Standard Room",
                "price": 199,
                "currency": "USD",
                "available": 5,
                "max_guests": 2,
                "description": "Comfortable room with city view",
            },
            {
                "type": "Deluxe Suite",
                "price": 399,
                "currency": "USD",
                "available": 2,
                "max_guests": 4,
                "description": "Spacious suite with premium amenities",
            },
        ],
        "check_in": "2024-02-15",
        "check_out": "2024-02-17",
        "price_per_night": 199,
        "currency": "USD",
    },
    {
        "id": "HTL002",
        "name": "Seaside Resort",
        "location": {
            "address": "456 Beach Avenue",
            "city": "Los Angeles",
            "country": "USA",
            "coordinates": {"lat": 34.0522, "lng": -118.2437},
        },
        "rating": 4.8,
        "images": ["https://example.com/hotel2-1.jpg", "https://example.com/hotel2-2.jpg"],
        "amenities": ["Beach Access", "WiFi", "Pool", "Restaurant", "Parking"],
        "room_types": [
            {
                "type": "Ocean View Room",
                "price": 299,
                "currency": "USD",
                "available": 8,
                "max_guests": 2,
                "description": "Room with stunning ocean views",
            },
        ],
        "check_in": "2024-02-16",
        "check_out": "2024-02-18",
        "price_per_night": 299,
        "currency": "USD",
    },
]

CARS: list[dict] = [
    {
        "id": "CAR001",
        "make": "Toyota",
        "model": "Camry",
        "year": 2023,
        "category": "midsize",
        "transmission": "automatic",
        "fuel_type": "hybrid",
        "seats": 5,
        "doors": 4,
        "air_conditioning": True,
        "image": "https://example.com/toyota-camry.jpg",
        "price_per_day": 45,
        "currency": "USD",
        "available": True,
        "pickup_location": "LAX Airport",
        "dropoff_location": "LAX Airport",
        "pickup_date": "2024-02-15",
        "dropoff_date": "2024-02-17",
    },
    {
        "id": "CAR002",
        "make": "BMW",
        "model": "3 Series",
        "year": 2023,
        "category": "luxury",
        "transmission": "automatic",
        "fuel_type": "petrol",
        "seats": 5,
        "doors": 4,
        "air_conditioning": True,
        "image": "https://example.com/bmw-3series.jpg",
        "price_per_day": 89,
        "currency": "USD",
        "available": True,
        "pickup_location": "JFK Airport",
        "dropoff_location": "JFK Airport",
        "pickup_date": "2024-02-16",
        "dropoff_date": "2024-02-18",
    },
    {
        "id": "CAR003",
        "make": "Ford",
        "model": "Explorer",
        "year": 2023,
        "category": "suv",
        "transmission": "automatic",
        "fuel_type": "petrol",
        "seats": 7,
        "doors": 4,
        "air_conditioning": True,
        "image": "https://example.com/ford-explorer.jpg",
        "price_per_day": 65,
        "currency": "USD",
        "available": True,
        "pickup_location": "ORD Airport",
        "dropoff_location": "ORD Airport",
        "pickup_date": "2024-02-17",
        "dropoff_date": "2024-02-19",
    },
]

# (code, name, city, country)
AIRPORTS: list[tuple[str, str, str, str]] = [
    ("JFK", "John F. Kennedy International Airport", "New York", "USA"),
    ("LAX", "Los Angeles International Airport", "Los Angeles", "USA"),
    ("ORD", "O'Hare International Airport", "Chicago", "USA"),
    ("LHR", "Heathrow Airport", "London", "UK"),
    ("CDG", "Charles de Gaulle Airport", "Paris", "France"),
    ("NRT", "Narita International Airport", "Tokyo", "Japan"),
    ("SYD", "Sydney Kingsford Smith Airport", "Sydney", "Australia"),
]
