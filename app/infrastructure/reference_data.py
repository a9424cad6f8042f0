"""
Static agronomic reference data.

Crop parameters follow FAO-56 (stage lengths, crop coefficients) and FAO-33
(yield response factor Ky); disease and pest conditions are compiled from
ICAR and USDA plant pathology guidance. Centralizing the raw records here
keeps the tables easy to review and update; they are validated into
immutable profiles by ``app.infrastructure.reference_tables`` at import.
"""

CROP_DATA = {
    "rice": {
        "id": "rice",
        "name": "Rice",
        "scientific_name": "Oryza sativa",
        "category": "cereal",
        "growth_stages": {"initial": 30, "development": 30, "mid": 40, "late": 20},
        "yield_response_factor": 1.20,
        "crop_coefficient": {"kc_initial": 1.05, "kc_mid": 1.20, "kc_end": 0.90},
        "temperature": {"min": 20, "optimal": (25, 32), "max": 38},
        "rainfall": {"min": 1000, "optimal": (1200, 1800), "max": 2500},
        "soil_types": ["Clay", "Loamy", "Silty"],
        "nutrients": {"nitrogen": 120, "phosphorus": 60, "potassium": 40},
        "average_yield": 2500,
        "potential_yield": 4500,
    },
    "wheat": {
        "id": "wheat",
        "name": "Wheat",
        "scientific_name": "Triticum aestivum",
        "category": "cereal",
        "growth_stages": {"initial": 20, "development": 30, "mid": 50, "late": 20},
        "yield_response_factor": 1.05,
        "crop_coefficient": {"kc_initial": 0.70, "kc_mid": 1.15, "kc_end": 0.40},
        "temperature": {"min": 10, "optimal": (15, 25), "max": 35},
        "rainfall": {"min": 450, "optimal": (600, 900), "max": 1200},
        "soil_types": ["Loamy", "Clay", "Silty"],
        "nutrients": {"nitrogen": 100, "phosphorus": 50, "potassium": 30},
        "average_yield": 2000,
        "potential_yield": 3500,
    },
    "cotton": {
        "id": "cotton",
        "name": "Cotton",
        "scientific_name": "Gossypium hirsutum",
        "category": "fiber",
        "growth_stages": {"initial": 30, "development": 50, "mid": 50, "late": 20},
        "yield_response_factor": 0.85,
        "crop_coefficient": {"kc_initial": 0.50, "kc_mid": 1.15, "kc_end": 0.70},
        "temperature": {"min": 15, "optimal": (21, 30), "max": 40},
        "rainfall": {"min": 500, "optimal": (700, 1200), "max": 1500},
        "soil_types": ["Loamy", "Sandy", "Clay"],
        "nutrients": {"nitrogen": 120, "phosphorus": 60, "potassium": 60},
        "average_yield": 1500,
        "potential_yield": 2500,
    },
    "corn": {
        "id": "corn",
        "name": "Corn",
        "scientific_name": "Zea mays",
        "category": "cereal",
        "growth_stages": {"initial": 20, "development": 35, "mid": 40, "late": 15},
        "yield_response_factor": 1.25,
        "crop_coefficient": {"kc_initial": 0.70, "kc_mid": 1.20, "kc_end": 0.60},
        "temperature": {"min": 15, "optimal": (20, 30), "max": 40},
        "rainfall": {"min": 500, "optimal": (600, 1000), "max": 1500},
        "soil_types": ["Loamy", "Sandy", "Silty"],
        "nutrients": {"nitrogen": 150, "phosphorus": 60, "potassium": 40},
        "average_yield": 3000,
        "potential_yield": 5000,
    },
    "soybean": {
        "id": "soybean",
        "name": "Soybean",
        "scientific_name": "Glycine max",
        "category": "oilseed",
        "growth_stages": {"initial": 20, "development": 30, "mid": 35, "late": 15},
        "yield_response_factor": 0.85,
        "crop_coefficient": {"kc_initial": 0.50, "kc_mid": 1.15, "kc_end": 0.50},
        "temperature": {"min": 15, "optimal": (20, 30), "max": 38},
        "rainfall": {"min": 450, "optimal": (600, 1000), "max": 1300},
        "soil_types": ["Loamy", "Sandy", "Clay"],
        # nitrogen-fixing
        "nutrients": {"nitrogen": 30, "phosphorus": 60, "potassium": 40},
        "average_yield": 1800,
        "potential_yield": 3000,
    },
    "sugarcane": {
        "id": "sugarcane",
        "name": "Sugarcane",
        "scientific_name": "Saccharum officinarum",
        "category": "cash",
        "growth_stages": {"initial": 35, "development": 60, "mid": 180, "late": 90},
        "yield_response_factor": 1.20,
        "crop_coefficient": {"kc_initial": 0.50, "kc_mid": 1.25, "kc_end": 0.75},
        "temperature": {"min": 20, "optimal": (25, 35), "max": 40},
        "rainfall": {"min": 1500, "optimal": (1800, 2500), "max": 3000},
        "soil_types": ["Loamy", "Clay", "Silty"],
        "nutrients": {"nitrogen": 200, "phosphorus": 80, "potassium": 100},
        "average_yield": 35000,
        "potential_yield": 60000,
    },
    "potato": {
        "id": "potato",
        "name": "Potato",
        "scientific_name": "Solanum tuberosum",
        "category": "vegetable",
        "growth_stages": {"initial": 25, "development": 30, "mid": 30, "late": 5},
        "yield_response_factor": 1.10,
        "crop_coefficient": {"kc_initial": 0.50, "kc_mid": 1.15, "kc_end": 0.75},
        "temperature": {"min": 10, "optimal": (15, 25), "max": 30},
        "rainfall": {"min": 500, "optimal": (600, 900), "max": 1200},
        "soil_types": ["Loamy", "Sandy"],
        "nutrients": {"nitrogen": 150, "phosphorus": 80, "potassium": 180},
        "average_yield": 15000,
        "potential_yield": 25000,
    },
    "tomato": {
        "id": "tomato",
        "name": "Tomato",
        "scientific_name": "Solanum lycopersicum",
        "category": "vegetable",
        "growth_stages": {"initial": 30, "development": 40, "mid": 40, "late": 10},
        "yield_response_factor": 1.05,
        "crop_coefficient": {"kc_initial": 0.60, "kc_mid": 1.15, "kc_end": 0.80},
        "temperature": {"min": 15, "optimal": (20, 30), "max": 35},
        "rainfall": {"min": 400, "optimal": (600, 1000), "max": 1300},
        "soil_types": ["Loamy", "Sandy"],
        "nutrients": {"nitrogen": 120, "phosphorus": 80, "potassium": 100},
        "average_yield": 20000,
        "potential_yield": 35000,
    },
}

# Substituted for unknown crop identifiers: moderate yield, neutral coefficients.
GENERIC_CROP_DATA = {
    "id": "generic",
    "name": "Generic Crop",
    "scientific_name": "",
    "category": "generic",
    "growth_stages": {"initial": 25, "development": 35, "mid": 40, "late": 20},
    "yield_response_factor": 1.0,
    "crop_coefficient": {"kc_initial": 0.70, "kc_mid": 1.00, "kc_end": 0.80},
    "temperature": {"min": 10, "optimal": (18, 30), "max": 35},
    "rainfall": {"min": 500, "optimal": (700, 1200), "max": 1500},
    "soil_types": ["Clay", "Sandy", "Loamy", "Silty"],
    "nutrients": {"nitrogen": 100, "phosphorus": 50, "potassium": 50},
    "average_yield": 1800,
    "potential_yield": 3000,
}

# Water-holding capacity in mm per cm of soil depth.
SOIL_DATA = {
    "clay": {
        "soil_type": "Clay",
        "name": "Clay",
        "water_holding_capacity": 2.0,
        "irrigation_efficiency": 0.90,
    },
    "sandy": {
        "soil_type": "Sandy",
        "name": "Sandy",
        "water_holding_capacity": 0.8,
        "irrigation_efficiency": 0.80,
    },
    "loamy": {
        "soil_type": "Loamy",
        "name": "Loamy",
        "water_holding_capacity": 1.5,
        "irrigation_efficiency": 0.85,
    },
    "silty": {
        "soil_type": "Silty",
        "name": "Silty",
        "water_holding_capacity": 1.8,
        "irrigation_efficiency": 0.85,
    },
}

# Substituted for unknown soil types: loam-like capacity, drip efficiency.
FALLBACK_SOIL_DATA = {
    "soil_type": None,
    "name": "Unknown",
    "water_holding_capacity": 1.5,
    "irrigation_efficiency": 0.85,
}

# Disease pressure (0-100) by soil type and crop.
SOIL_DISEASE_RISK = {
    "clay": {"rice": 30, "wheat": 40, "cotton": 50},
    "loamy": {"rice": 20, "wheat": 20, "cotton": 30},
    "sandy": {"rice": 50, "wheat": 30, "cotton": 20},
    "silty": {"rice": 25, "wheat": 25, "cotton": 35},
}

DEFAULT_SOIL_DISEASE_RISK = 30

DISEASE_DATA = {
    "rice_blast": {
        "id": "rice_blast",
        "name": "Rice Blast",
        "scientific_name": "Pyricularia oryzae",
        "type": "fungal",
        "affected_crops": ["rice"],
        "temperature_range": (25, 28),
        "humidity_range": (85, 100),
        "rainfall": "high",
        "symptoms": (
            "Diamond-shaped lesions on leaves",
            "White to gray centers with brown margins",
            "Neck rot causing lodging",
            "Panicle infection reducing grain fill",
        ),
        "yield_loss": (30, 70),
        "severity": "critical",
        "prevention": (
            "Use resistant varieties",
            "Avoid excessive nitrogen fertilization",
            "Maintain proper plant spacing",
            "Remove infected plant debris",
            "Alternate wetting and drying",
        ),
        "organic_control": (
            "Neem oil spray (5ml/liter)",
            "Pseudomonas fluorescens application",
            "Trichoderma viride seed treatment",
            "Silicon fertilization",
        ),
        "chemical_control": (
            "Tricyclazole 75% WP @ 0.6g/liter",
            "Carbendazim 50% WP @ 1g/liter",
            "Azoxystrobin 23% SC @ 1ml/liter",
        ),
        "critical_stages": ("Tillering", "Panicle initiation", "Flowering"),
        "spread_rate": "fast",
    },
    "rice_bacterial_blight": {
        "id": "rice_bacterial_blight",
        "name": "Bacterial Blight",
        "scientific_name": "Xanthomonas oryzae",
        "type": "bacterial",
        "affected_crops": ["rice"],
        "temperature_range": (25, 34),
        "humidity_range": (70, 100),
        "rainfall": "high",
        "symptoms": (
            "Water-soaked lesions on leaf tips",
            "Yellow to white lesions along leaf margins",
            "Wilting of seedlings (kresek)",
            "Milky bacterial ooze from cut stems",
        ),
        "yield_loss": (20, 50),
        "severity": "high",
        "prevention": (
            "Use certified disease-free seeds",
            "Plant resistant varieties",
            "Avoid deep water and high nitrogen",
            "Maintain field sanitation",
            "Avoid injury to plants",
        ),
        "organic_control": (
            "Copper oxychloride spray",
            "Pseudomonas fluorescens",
            "Plant extracts (garlic, ginger)",
        ),
        "chemical_control": (
            "Streptocycline 300ppm + Copper oxychloride 0.25%",
            "Plantomycin @ 1g/liter",
        ),
        "critical_stages": ("Tillering", "Maximum tillering", "Booting"),
        "spread_rate": "fast",
    },
    "wheat_rust": {
        "id": "wheat_rust",
        "name": "Wheat Rust (Yellow, Brown, Black)",
        "scientific_name": "Puccinia spp.",
        "type": "fungal",
        "affected_crops": ["wheat"],
        "temperature_range": (15, 25),
        "humidity_range": (70, 100),
        "rainfall": "medium",
        "symptoms": (
            "Yellow/orange pustules on leaves (Yellow rust)",
            "Brown pustules scattered on leaves (Brown rust)",
            "Black pustules on stems (Black rust)",
            "Premature leaf drying",
        ),
        "yield_loss": (20, 60),
        "severity": "critical",
        "prevention": (
            "Grow resistant varieties",
            "Early sowing",
            "Balanced fertilization",
            "Remove volunteer wheat plants",
            "Crop rotation",
        ),
        "organic_control": (
            "Sulfur dust application",
            "Neem oil spray",
            "Bordeaux mixture",
        ),
        "chemical_control": (
            "Propiconazole 25% EC @ 1ml/liter",
            "Tebuconazole 25% EC @ 1ml/liter",
            "Mancozeb 75% WP @ 2.5g/liter",
        ),
        "critical_stages": ("Tillering", "Stem elongation", "Heading"),
        "spread_rate": "fast",
    },
    "cotton_wilt": {
        "id": "cotton_wilt",
        "name": "Cotton Wilt",
        "scientific_name": "Fusarium oxysporum",
        "type": "fungal",
        "affected_crops": ["cotton"],
        "temperature_range": (25, 32),
        "humidity_range": (60, 80),
        "rainfall": "medium",
        "symptoms": (
            "Yellowing and drooping of leaves",
            "Vascular browning in stem",
            "Sudden wilting of plants",
            "Plant death in severe cases",
        ),
        "yield_loss": (30, 80),
        "severity": "critical",
        "prevention": (
            "Use wilt-resistant varieties",
            "Crop rotation with non-host crops",
            "Soil solarization",
            "Maintain soil pH 6.5-7.5",
            "Avoid waterlogging",
        ),
        "organic_control": (
            "Trichoderma viride seed treatment",
            "Pseudomonas fluorescens soil application",
            "Neem cake application",
            "Biocontrol agents",
        ),
        "chemical_control": (
            "Carbendazim seed treatment @ 2g/kg",
            "Soil drenching with Carbendazim",
        ),
        "critical_stages": ("Seedling", "Vegetative", "Flowering"),
        "spread_rate": "moderate",
    },
    "tomato_late_blight": {
        "id": "tomato_late_blight",
        "name": "Late Blight",
        "scientific_name": "Phytophthora infestans",
        "type": "fungal",
        "affected_crops": ["tomato", "potato"],
        "temperature_range": (15, 25),
        "humidity_range": (85, 100),
        "rainfall": "high",
        "symptoms": (
            "Water-soaked lesions on leaves",
            "White fungal growth on leaf undersides",
            "Brown lesions on stems",
            "Fruit rot with firm brown lesions",
        ),
        "yield_loss": (40, 100),
        "severity": "critical",
        "prevention": (
            "Use resistant varieties",
            "Avoid overhead irrigation",
            "Proper plant spacing",
            "Remove infected plants immediately",
            "Avoid planting near potato fields",
        ),
        "organic_control": (
            "Copper-based fungicides",
            "Bordeaux mixture spray",
            "Neem oil application",
        ),
        "chemical_control": (
            "Mancozeb 75% WP @ 2.5g/liter",
            "Metalaxyl + Mancozeb @ 2g/liter",
            "Cymoxanil + Mancozeb @ 2g/liter",
        ),
        "critical_stages": ("Flowering", "Fruiting"),
        "spread_rate": "fast",
    },
    "potato_late_blight": {
        "id": "potato_late_blight",
        "name": "Potato Late Blight",
        "scientific_name": "Phytophthora infestans",
        "type": "fungal",
        "affected_crops": ["potato"],
        "temperature_range": (10, 25),
        "humidity_range": (85, 100),
        "rainfall": "high",
        "symptoms": (
            "Dark water-soaked lesions on leaves",
            "White mold on leaf undersides",
            "Tuber rot with reddish-brown discoloration",
            "Rapid plant death in humid conditions",
        ),
        "yield_loss": (50, 100),
        "severity": "critical",
        "prevention": (
            "Plant certified disease-free seed tubers",
            "Hill up soil to protect tubers",
            "Avoid irrigation during cool humid periods",
            "Destroy cull piles",
            "Use resistant varieties",
        ),
        "organic_control": (
            "Copper fungicides",
            "Bordeaux mixture",
            "Potassium bicarbonate spray",
        ),
        "chemical_control": (
            "Mancozeb 75% WP @ 2.5g/liter",
            "Metalaxyl + Mancozeb @ 2.5g/liter",
            "Dimethomorph + Mancozeb @ 2g/liter",
        ),
        "critical_stages": ("Tuber formation", "Tuber bulking"),
        "spread_rate": "fast",
    },
    "stem_borer": {
        "id": "stem_borer",
        "name": "Stem Borer",
        "scientific_name": "Scirpophaga incertulas",
        "type": "pest",
        "affected_crops": ["rice", "corn", "sugarcane"],
        "temperature_range": (25, 35),
        "humidity_range": (60, 90),
        "rainfall": "medium",
        "symptoms": (
            "Dead hearts in vegetative stage",
            "White ears in reproductive stage",
            "Holes in stem with frass",
            "Stunted plant growth",
        ),
        "yield_loss": (20, 50),
        "severity": "high",
        "prevention": (
            "Remove and destroy stubbles",
            "Avoid staggered planting",
            "Use light traps",
            "Maintain field sanitation",
            "Grow resistant varieties",
        ),
        "organic_control": (
            "Release Trichogramma egg parasitoids",
            "Neem seed kernel extract spray",
            "Bacillus thuringiensis application",
            "Pheromone traps",
        ),
        "chemical_control": (
            "Chlorantraniliprole 18.5% SC @ 0.3ml/liter",
            "Cartap hydrochloride 50% SP @ 1g/liter",
            "Fipronil 5% SC @ 2ml/liter",
        ),
        "critical_stages": ("Tillering", "Panicle initiation"),
        "spread_rate": "moderate",
    },
    "aphids": {
        "id": "aphids",
        "name": "Aphids",
        "scientific_name": "Aphis spp.",
        "type": "pest",
        "affected_crops": ["wheat", "cotton", "tomato", "potato", "soybean"],
        "temperature_range": (20, 30),
        "humidity_range": (50, 80),
        "rainfall": "low",
        "symptoms": (
            "Curling and yellowing of leaves",
            "Sticky honeydew on leaves",
            "Sooty mold growth",
            "Stunted plant growth",
            "Virus transmission",
        ),
        "yield_loss": (10, 40),
        "severity": "medium",
        "prevention": (
            "Encourage natural predators (ladybugs)",
            "Use reflective mulches",
            "Remove alternate hosts",
            "Maintain field hygiene",
            "Use resistant varieties",
        ),
        "organic_control": (
            "Neem oil spray (5ml/liter)",
            "Soap water spray",
            "Garlic extract spray",
            "Release ladybird beetles",
        ),
        "chemical_control": (
            "Imidacloprid 17.8% SL @ 0.3ml/liter",
            "Thiamethoxam 25% WG @ 0.2g/liter",
            "Acetamiprid 20% SP @ 0.2g/liter",
        ),
        "critical_stages": ("Seedling", "Vegetative", "Flowering"),
        "spread_rate": "fast",
    },
}
