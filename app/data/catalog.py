"""Default FPV catalog seeded into an empty database.

Tags in compatible_with follow these conventions:
  battery-1s, battery-2s ...     cell count a drone accepts / a battery is
  radio-frsky, radio-elrs ...    receiver protocol
  dji-air-unit                   DJI digital video system
  all                            compatible with everything
"""

from app.builder.types import ComponentCategory

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=500&q=80"

DEFAULT_CATALOG: list[dict] = [
    # Drones
    {
        "name": "HappyModel Mobula 6 1S",
        "category": ComponentCategory.drone,
        "price": 89.99,
        "image": _IMG.format("1579829366248-204fe8413f31"),
        "description": "Ultra-light 1S whoop with 65mm propellers",
        "weight": 20,
        "in_stock": True,
        "specifications": {
            "weight": "20g",
            "motors": "19000KV",
            "flightTime": "~4-5 min",
            "fc": "F4 1S",
            "camera": "RunCam Nano 3",
            "receiver": "SPI",
        },
        "compatible_with": ["battery-1s", "radio-frsky", "radio-flysky"],
    },
    {
        "name": "BetaFPV Meteor65",
        "category": ComponentCategory.drone,
        "price": 99.99,
        "image": _IMG.format("1473968512647-3e447244af8f"),
        "description": "65mm 1S brushless whoop with F4 FC",
        "weight": 23,
        "in_stock": True,
        "specifications": {
            "weight": "23g",
            "motors": "18000KV",
            "flightTime": "~4 min",
            "fc": "F4 1S",
            "camera": "CMOS",
            "receiver": "SPI/ELRS",
        },
        "compatible_with": ["battery-1s", "radio-frsky", "radio-elrs"],
    },
    # Goggles
    {
        "name": "FatShark Recon V3",
        "category": ComponentCategory.goggles,
        "price": 129.99,
        "image": _IMG.format("1596566727241-dd546bb8c9fa"),
        "description": "Entry-level box goggles with 40CH receiver",
        "weight": 380,
        "in_stock": True,
        "specifications": {
            "resolution": "800x480",
            "fov": "55°",
            "dvr": True,
            "battery": "3.7V 1800mAh",
        },
        "compatible_with": ["all"],
    },
    {
        "name": "DJI FPV Goggles V2",
        "category": ComponentCategory.goggles,
        "price": 569.99,
        "image": _IMG.format("1578347378134-42e465b6230f"),
        "description": "HD digital FPV system with low latency",
        "weight": 420,
        "in_stock": True,
        "specifications": {
            "resolution": "1440x810",
            "fov": "150°",
            "latency": "~28ms",
            "refreshRate": "144Hz",
        },
        "compatible_with": ["dji-air-unit"],
    },
    # Radios
    {
        "name": "RadioMaster TX16S",
        "category": ComponentCategory.radio,
        "price": 189.99,
        "image": _IMG.format("1523961131990-5ea7c61b2107"),
        "description": "Multi-protocol OpenTX radio with hall sensor gimbals",
        "weight": 700,
        "in_stock": True,
        "specifications": {
            "channels": 16,
            "firmware": "OpenTX",
            "protocols": "Multi-module",
            "battery": "2x 18650",
        },
        "compatible_with": ["radio-frsky", "radio-flysky", "radio-spektrum", "radio-elrs"],
    },
    {
        "name": "BetaFPV LiteRadio 2",
        "category": ComponentCategory.radio,
        "price": 49.99,
        "image": _IMG.format("1581092446327-9b52bd1570c2"),
        "description": "Compact game-style controller with FrSky D8 protocol",
        "weight": 210,
        "in_stock": True,
        "specifications": {
            "channels": 8,
            "protocols": "FrSky D8/D16",
            "battery": "1000mAh",
            "usb": "Simulator Compatible",
        },
        "compatible_with": ["radio-frsky"],
    },
    # Batteries
    {
        "name": "GNB 300mAh 1S LiPo",
        "category": ComponentCategory.battery,
        "price": 5.99,
        "image": _IMG.format("1595661671316-5ced32a0a678"),
        "description": "High-discharge 1S battery for TinyWhoop drones",
        "weight": 8.5,
        "in_stock": True,
        "specifications": {
            "capacity": "300mAh",
            "voltage": "3.8V HV",
            "discharge": "30C",
            "weight": "8.5g",
        },
        "compatible_with": ["battery-1s"],
    },
    {
        "name": "Tattu 450mAh 1S LiPo",
        "category": ComponentCategory.battery,
        "price": 7.99,
        "image": _IMG.format("1595661671316-5ced32a0a678"),
        "description": "High-capacity 1S battery for extended flight times",
        "weight": 10.5,
        "in_stock": True,
        "specifications": {
            "capacity": "450mAh",
            "voltage": "3.7V",
            "discharge": "25C",
            "weight": "10.5g",
        },
        "compatible_with": ["battery-1s"],
    },
    # Accessories
    {
        "name": "Gemfan 31mm Props",
        "category": ComponentCategory.accessory,
        "price": 3.99,
        "image": _IMG.format("1598440947619-2c35fc9aa908"),
        "description": "Durable micro propellers for 0.8mm shafts (set of 8)",
        "weight": 0.5,
        "in_stock": True,
        "specifications": {
            "size": "31mm",
            "pitch": "3 Blade",
            "quantity": 8,
            "material": "Polycarbonate",
        },
        "compatible_with": ["all"],
    },
    {
        "name": "URUAV 1S LiPo Charger",
        "category": ComponentCategory.accessory,
        "price": 19.99,
        "image": _IMG.format("1497515114629-f71d768fd07c"),
        "description": "6-port USB charger for 1S batteries with storage mode",
        "weight": 45,
        "in_stock": True,
        "specifications": {
            "ports": 6,
            "connector": "PH2.0",
            "power": "USB-C",
            "features": "Storage Mode",
        },
        "compatible_with": ["battery-1s"],
    },
]
