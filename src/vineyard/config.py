# ------------------------------------------------------------------
# Geography
# ------------------------------------------------------------------

ASPECTS = (
    "North", "Northeast", "East", "Southeast",
    "South", "Southwest", "West", "Northwest",
)

GRAPE_VARIETIES = (
    "Barbera", "Chardonnay", "Pinot Noir",
    "Primitivo", "Sauvignon Blanc", "Tempranillo",
)

# Land price range per region (EUR per hectare)
REGION_PRICE_RANGES = {
    "France": {
        "Bourgogne": (1000000, 10000000),
        "Champagne": (500000, 2000000),
        "Bordeaux": (100000, 1000000),
        "Rhone Valley": (30000, 120000),
        "Jura": (25000, 45000),
    },
    "United States": {
        "Napa Valley": (300000, 1000000),
        "Sonoma County": (100000, 500000),
        "Willamette Valley": (50000, 250000),
        "Central Coast": (20000, 150000),
        "Finger Lakes": (10000, 50000),
    },
    "Italy": {
        "Tuscany": (80000, 1000000),
        "Piedmont": (50000, 700000),
        "Veneto": (20000, 100000),
        "Sicily": (10000, 60000),
        "Puglia": (5000, 30000),
    },
    "Germany": {
        "Rheingau": (50000, 200000),
        "Mosel": (30000, 150000),
        "Pfalz": (15000, 60000),
        "Ahr": (20000, 50000),
        "Rheinhessen": (10000, 40000),
    },
    "Spain": {
        "Rioja": (30000, 100000),
        "Ribera del Duero": (30000, 80000),
        "Jerez": (10000, 40000),
        "La Mancha": (5000, 30000),
        "Jumilla": (5000, 25000),
    },
}
DEFAULT_PRICE_RANGE = (5000, 30000)

# Outlier regions left out of the global land-value ceiling
MAX_LAND_VALUE_EXCLUDED_REGIONS = {("France", "Bourgogne"), ("France", "Champagne")}

# Raw regional prestige (0.35 - 1.0)
REGION_PRESTIGE_RANKINGS = {
    "France": {
        "Bourgogne": 1.00,
        "Champagne": 0.98,
        "Bordeaux": 0.87,
        "Jura": 0.65,
        "Rhone Valley": 0.60,
    },
    "United States": {
        "Napa Valley": 0.90,
        "Sonoma County": 0.76,
        "Willamette Valley": 0.67,
        "Central Coast": 0.63,
        "Finger Lakes": 0.48,
    },
    "Italy": {
        "Tuscany": 0.83,
        "Piedmont": 0.80,
        "Veneto": 0.55,
        "Sicily": 0.46,
        "Puglia": 0.35,
    },
    "Germany": {
        "Rheingau": 0.73,
        "Mosel": 0.72,
        "Pfalz": 0.57,
        "Ahr": 0.41,
        "Rheinhessen": 0.37,
    },
    "Spain": {
        "Rioja": 0.70,
        "Ribera del Duero": 0.65,
        "Jerez": 0.51,
        "La Mancha": 0.42,
        "Jumilla": 0.39,
    },
}
REGION_PRESTIGE_BOUNDS = (0.35, 1.0)
DEFAULT_RAW_REGION_PRESTIGE = 0.5

# Typical vineyard altitude per region (metres)
REGION_ALTITUDE_RANGES = {
    "France": {
        "Bordeaux": (0, 100),
        "Bourgogne": (200, 500),
        "Champagne": (100, 300),
        "Rhone Valley": (100, 400),
        "Jura": (250, 400),
    },
    "Germany": {
        "Ahr": (100, 300),
        "Mosel": (100, 350),
        "Pfalz": (100, 300),
        "Rheingau": (80, 250),
        "Rheinhessen": (80, 250),
    },
    "Italy": {
        "Piedmont": (150, 600),
        "Puglia": (0, 200),
        "Sicily": (50, 900),
        "Tuscany": (150, 600),
        "Veneto": (50, 400),
    },
    "Spain": {
        "Jumilla": (400, 800),
        "La Mancha": (600, 800),
        "Ribera del Duero": (700, 900),
        "Rioja": (300, 700),
        "Jerez": (0, 100),
    },
    "United States": {
        "Central Coast": (0, 500),
        "Finger Lakes": (100, 300),
        "Napa Valley": (0, 600),
        "Sonoma County": (0, 500),
        "Willamette Valley": (50, 300),
    },
}
DEFAULT_ALTITUDE_RANGE = (0, 100)

# Aspect quality per region, keyed in ASPECTS order
_ASPECT_ROWS = {
    "Italy": {
        "Piedmont": (0.25, 0.45, 0.65, 1.00, 0.90, 0.80, 0.60, 0.40),
        "Tuscany": (0.30, 0.55, 0.75, 1.00, 0.90, 0.85, 0.70, 0.50),
        "Veneto": (0.20, 0.40, 0.60, 0.95, 1.00, 0.85, 0.65, 0.35),
        "Sicily": (0.45, 0.65, 0.85, 1.00, 0.90, 0.80, 0.70, 0.55),
        "Puglia": (0.50, 0.65, 0.85, 1.00, 0.90, 0.85, 0.75, 0.55),
    },
    "France": {
        "Bordeaux": (0.30, 0.40, 0.60, 0.85, 1.00, 0.95, 0.80, 0.50),
        "Bourgogne": (0.25, 0.45, 0.65, 1.00, 0.90, 0.80, 0.55, 0.40),
        "Champagne": (0.20, 0.35, 0.55, 0.90, 1.00, 0.80, 0.60, 0.35),
        "Rhone Valley": (0.25, 0.50, 0.70, 1.00, 0.90, 0.85, 0.65, 0.40),
        "Jura": (0.20, 0.45, 0.65, 0.95, 1.00, 0.85, 0.60, 0.35),
    },
    "Spain": {
        "Rioja": (0.40, 0.55, 0.75, 0.85, 1.00, 0.90, 0.80, 0.60),
        "Ribera del Duero": (0.35, 0.60, 0.80, 0.90, 1.00, 0.85, 0.70, 0.55),
        "Jumilla": (0.50, 0.65, 0.85, 1.00, 0.90, 0.80, 0.70, 0.60),
        "La Mancha": (0.45, 0.60, 0.85, 1.00, 0.90, 0.80, 0.75, 0.50),
        "Jerez": (0.50, 0.70, 0.85, 1.00, 0.90, 0.85, 0.80, 0.60),
    },
    "United States": {
        "Napa Valley": (0.40, 0.65, 0.85, 1.00, 0.90, 0.85, 0.75, 0.60),
        "Sonoma County": (0.35, 0.60, 0.80, 1.00, 0.90, 0.85, 0.75, 0.55),
        "Willamette Valley": (0.20, 0.45, 0.70, 0.85, 1.00, 0.90, 0.65, 0.35),
        "Finger Lakes": (0.25, 0.50, 0.70, 0.85, 1.00, 0.85, 0.75, 0.45),
        "Central Coast": (0.35, 0.60, 0.80, 1.00, 0.90, 0.85, 0.70, 0.50),
    },
    "Germany": {
        "Mosel": (0.15, 0.35, 0.65, 0.95, 1.00, 0.85, 0.60, 0.30),
        "Rheingau": (0.20, 0.50, 0.70, 0.90, 1.00, 0.85, 0.75, 0.40),
        "Rheinhessen": (0.25, 0.60, 0.80, 0.90, 1.00, 0.85, 0.70, 0.50),
        "Pfalz": (0.30, 0.65, 0.80, 0.90, 1.00, 0.85, 0.70, 0.50),
        "Ahr": (0.10, 0.40, 0.65, 0.85, 1.00, 0.80, 0.65, 0.35),
    },
}
REGION_ASPECT_RATINGS = {
    country: {region: dict(zip(ASPECTS, row)) for region, row in regions.items()}
    for country, regions in _ASPECT_ROWS.items()
}
DEFAULT_ASPECT_RATING = 0.5
ASPECT_NORMALIZATION_BOUNDS = (0.10, 1.0)

REGION_SOIL_TYPES = {
    "France": {
        "Bordeaux": ("Clay", "Gravel", "Limestone", "Sand"),
        "Bourgogne": ("Clay-Limestone", "Limestone", "Marl"),
        "Champagne": ("Chalk", "Clay", "Limestone"),
        "Rhone Valley": ("Clay", "Granite", "Limestone", "Sand"),
        "Jura": ("Clay", "Limestone", "Marl"),
    },
    "Germany": {
        "Ahr": ("Devonian Slate", "Greywacke", "Loess", "Volcanic Soil"),
        "Mosel": ("Blue Devonian Slate", "Red Devonian Slate"),
        "Pfalz": ("Basalt", "Limestone", "Loess", "Sandstone"),
        "Rheingau": ("Loess", "Phyllite", "Quartzite", "Slate"),
        "Rheinhessen": ("Clay", "Limestone", "Loess", "Quartz"),
    },
    "Italy": {
        "Piedmont": ("Clay", "Limestone", "Marl", "Sand"),
        "Puglia": ("Clay", "Limestone", "Red Earth", "Sand"),
        "Sicily": ("Clay", "Limestone", "Sand", "Volcanic Soil"),
        "Tuscany": ("Clay", "Galestro", "Limestone", "Sandstone"),
        "Veneto": ("Alluvial", "Clay", "Limestone", "Volcanic Soil"),
    },
    "Spain": {
        "Jumilla": ("Clay", "Limestone", "Sand"),
        "La Mancha": ("Clay", "Clay-Limestone", "Sand"),
        "Ribera del Duero": ("Alluvial", "Clay", "Limestone"),
        "Rioja": ("Alluvial", "Clay", "Clay-Limestone", "Ferrous Clay"),
        "Jerez": ("Albariza", "Barros", "Arenas"),
    },
    "United States": {
        "Central Coast": ("Clay", "Loam", "Sand", "Shale"),
        "Finger Lakes": ("Clay", "Gravel", "Limestone", "Shale"),
        "Napa Valley": ("Alluvial", "Clay", "Loam", "Volcanic"),
        "Sonoma County": ("Clay", "Loam", "Sand", "Volcanic"),
        "Willamette Valley": ("Basalt", "Clay", "Marine Sediment", "Volcanic"),
    },
}

# Baseline growing-season heat per region (0 = cool, 1 = hot)
REGION_HEAT_PROFILE = {
    "France": {
        "Bordeaux": 0.55,
        "Bourgogne": 0.42,
        "Champagne": 0.32,
        "Rhone Valley": 0.65,
        "Jura": 0.38,
    },
    "Germany": {
        "Ahr": 0.30,
        "Mosel": 0.32,
        "Pfalz": 0.42,
        "Rheingau": 0.38,
        "Rheinhessen": 0.40,
    },
    "Italy": {
        "Piedmont": 0.52,
        "Puglia": 0.80,
        "Sicily": 0.82,
        "Tuscany": 0.62,
        "Veneto": 0.50,
    },
    "Spain": {
        "Jumilla": 0.78,
        "La Mancha": 0.75,
        "Ribera del Duero": 0.58,
        "Rioja": 0.55,
        "Jerez": 0.85,
    },
    "United States": {
        "Central Coast": 0.60,
        "Finger Lakes": 0.30,
        "Napa Valley": 0.68,
        "Sonoma County": 0.58,
        "Willamette Valley": 0.40,
    },
}
DEFAULT_REGION_HEAT = 0.5

# Extra (or missing) sun a slope receives relative to flat ground
ASPECT_SUN_EXPOSURE_OFFSETS = {
    "North": -0.10,
    "Northeast": -0.06,
    "East": -0.02,
    "Southeast": 0.05,
    "South": 0.08,
    "Southwest": 0.07,
    "West": 0.02,
    "Northwest": -0.05,
}
ALTITUDE_HEAT_COOLING_FACTOR = 0.15  # Heat lost at the top of a region's altitude range

# ------------------------------------------------------------------
# Grapes
# ------------------------------------------------------------------

# Altitude bands (metres): full marks inside preferred, zero outside tolerance
GRAPE_ALTITUDE_SUITABILITY = {
    "Barbera": {"preferred": (200, 520), "tolerance": (120, 650)},
    "Chardonnay": {"preferred": (180, 620), "tolerance": (0, 850)},
    "Pinot Noir": {"preferred": (260, 600), "tolerance": (130, 760)},
    "Primitivo": {"preferred": (80, 280), "tolerance": (0, 450)},
    "Sauvignon Blanc": {"preferred": (200, 580), "tolerance": (60, 850)},
    "Tempranillo": {"preferred": (350, 760), "tolerance": (200, 900)},
}

# Preferred heat window on the 0-1 sun exposure index
GRAPE_SUN_PREFERENCES = {
    "Barbera": {"optimal_min": 0.40, "optimal_max": 0.65, "tolerance": 0.18},
    "Chardonnay": {"optimal_min": 0.45, "optimal_max": 0.70, "tolerance": 0.22},
    "Pinot Noir": {"optimal_min": 0.30, "optimal_max": 0.55, "tolerance": 0.18},
    "Primitivo": {"optimal_min": 0.55, "optimal_max": 0.85, "tolerance": 0.15},
    "Sauvignon Blanc": {"optimal_min": 0.35, "optimal_max": 0.60, "tolerance": 0.20},
    "Tempranillo": {"optimal_min": 0.45, "optimal_max": 0.75, "tolerance": 0.18},
}

GRAPE_SOIL_PREFERENCES = {
    "Barbera": {
        "preferred": ("Clay", "Limestone", "Marl"),
        "tolerated": ("Sand", "Clay-Limestone", "Alluvial"),
    },
    "Chardonnay": {
        "preferred": ("Chalk", "Limestone", "Clay-Limestone", "Marl"),
        "tolerated": ("Clay", "Gravel", "Loam"),
    },
    "Pinot Noir": {
        "preferred": ("Clay-Limestone", "Limestone", "Marl", "Blue Devonian Slate"),
        "tolerated": ("Clay", "Volcanic", "Slate", "Devonian Slate", "Loess"),
    },
    "Primitivo": {
        "preferred": ("Red Earth", "Clay", "Limestone"),
        "tolerated": ("Sand", "Alluvial", "Volcanic Soil"),
    },
    "Sauvignon Blanc": {
        "preferred": ("Gravel", "Chalk", "Limestone", "Flint"),
        "tolerated": ("Clay", "Sand", "Slate", "Loess"),
    },
    "Tempranillo": {
        "preferred": ("Clay-Limestone", "Limestone", "Ferrous Clay"),
        "tolerated": ("Clay", "Alluvial", "Sand", "Albariza"),
    },
}

# Suitability of each grape per region (0-1)
REGION_GRAPE_SUITABILITY = {
    "Italy": {
        "Piedmont": {"Barbera": 1.0, "Chardonnay": 0.8, "Pinot Noir": 0.6, "Primitivo": 0.5, "Sauvignon Blanc": 0.6, "Tempranillo": 0.4},
        "Tuscany": {"Barbera": 0.9, "Chardonnay": 0.7, "Pinot Noir": 0.5, "Primitivo": 0.7, "Sauvignon Blanc": 0.7, "Tempranillo": 0.5},
        "Veneto": {"Barbera": 0.85, "Chardonnay": 0.75, "Pinot Noir": 0.7, "Primitivo": 0.6, "Sauvignon Blanc": 0.8, "Tempranillo": 0.35},
        "Sicily": {"Barbera": 0.8, "Chardonnay": 0.6, "Pinot Noir": 0.3, "Primitivo": 0.8, "Sauvignon Blanc": 0.5, "Tempranillo": 0.3},
        "Puglia": {"Barbera": 0.9, "Chardonnay": 0.65, "Pinot Noir": 0.4, "Primitivo": 1.0, "Sauvignon Blanc": 0.4, "Tempranillo": 0.6},
    },
    "France": {
        "Bordeaux": {"Barbera": 0.7, "Chardonnay": 0.8, "Pinot Noir": 0.6, "Primitivo": 0.6, "Sauvignon Blanc": 0.9, "Tempranillo": 0.5},
        "Bourgogne": {"Barbera": 0.4, "Chardonnay": 0.9, "Pinot Noir": 0.9, "Primitivo": 0.3, "Sauvignon Blanc": 0.7, "Tempranillo": 0.3},
        "Champagne": {"Barbera": 0.2, "Chardonnay": 0.9, "Pinot Noir": 0.8, "Primitivo": 0.2, "Sauvignon Blanc": 0.6, "Tempranillo": 0.1},
        "Rhone Valley": {"Barbera": 0.85, "Chardonnay": 0.75, "Pinot Noir": 0.5, "Primitivo": 0.7, "Sauvignon Blanc": 0.7, "Tempranillo": 0.5},
        "Jura": {"Barbera": 0.3, "Chardonnay": 0.9, "Pinot Noir": 0.8, "Primitivo": 0.2, "Sauvignon Blanc": 0.6, "Tempranillo": 0.2},
    },
    "Spain": {
        "Rioja": {"Barbera": 0.85, "Chardonnay": 0.7, "Pinot Noir": 0.4, "Primitivo": 0.5, "Sauvignon Blanc": 0.6, "Tempranillo": 0.95},
        "Ribera del Duero": {"Barbera": 0.8, "Chardonnay": 0.6, "Pinot Noir": 0.35, "Primitivo": 0.4, "Sauvignon Blanc": 0.5, "Tempranillo": 1.0},
        "Jumilla": {"Barbera": 0.9, "Chardonnay": 0.5, "Pinot Noir": 0.3, "Primitivo": 0.85, "Sauvignon Blanc": 0.4, "Tempranillo": 0.7},
        "La Mancha": {"Barbera": 0.85, "Chardonnay": 0.55, "Pinot Noir": 0.25, "Primitivo": 0.8, "Sauvignon Blanc": 0.5, "Tempranillo": 0.9},
        "Jerez": {"Barbera": 0.8, "Chardonnay": 0.5, "Pinot Noir": 0.2, "Primitivo": 0.7, "Sauvignon Blanc": 0.4, "Tempranillo": 0.4},
    },
    "United States": {
        "Napa Valley": {"Barbera": 0.9, "Chardonnay": 1.0, "Pinot Noir": 0.7, "Primitivo": 0.85, "Sauvignon Blanc": 0.8, "Tempranillo": 0.6},
        "Sonoma County": {"Barbera": 0.85, "Chardonnay": 0.95, "Pinot Noir": 0.75, "Primitivo": 0.8, "Sauvignon Blanc": 0.7, "Tempranillo": 0.5},
        "Willamette Valley": {"Barbera": 0.4, "Chardonnay": 0.85, "Pinot Noir": 1.0, "Primitivo": 0.3, "Sauvignon Blanc": 0.6, "Tempranillo": 0.3},
        "Finger Lakes": {"Barbera": 0.3, "Chardonnay": 0.7, "Pinot Noir": 0.75, "Primitivo": 0.2, "Sauvignon Blanc": 0.5, "Tempranillo": 0.25},
        "Central Coast": {"Barbera": 0.85, "Chardonnay": 0.8, "Pinot Noir": 0.6, "Primitivo": 0.75, "Sauvignon Blanc": 0.7, "Tempranillo": 0.55},
    },
    "Germany": {
        "Mosel": {"Barbera": 0.15, "Chardonnay": 0.8, "Pinot Noir": 1.0, "Primitivo": 0.1, "Sauvignon Blanc": 0.8, "Tempranillo": 0.15},
        "Rheingau": {"Barbera": 0.2, "Chardonnay": 0.85, "Pinot Noir": 0.9, "Primitivo": 0.15, "Sauvignon Blanc": 0.85, "Tempranillo": 0.2},
        "Rheinhessen": {"Barbera": 0.25, "Chardonnay": 0.8, "Pinot Noir": 0.85, "Primitivo": 0.2, "Sauvignon Blanc": 0.8, "Tempranillo": 0.25},
        "Pfalz": {"Barbera": 0.3, "Chardonnay": 0.75, "Pinot Noir": 0.8, "Primitivo": 0.25, "Sauvignon Blanc": 0.75, "Tempranillo": 0.3},
        "Ahr": {"Barbera": 0.1, "Chardonnay": 0.7, "Pinot Noir": 0.95, "Primitivo": 0.1, "Sauvignon Blanc": 0.6, "Tempranillo": 0.1},
    },
}

GRAPE_SUITABILITY_WEIGHTS = {
    "region": 0.4,
    "altitude": 0.2,
    "sun_exposure": 0.2,
    "soil": 0.2,
}
NEUTRAL_SOIL_SUITABILITY = 0.5

# ------------------------------------------------------------------
# Quality
# ------------------------------------------------------------------

QUALITY_WEIGHTS = {
    "land_value": 0.6,
    "vineyard_prestige": 0.4,
}

# Overgrowth: years of neglect per task, weighted by how much each hurts
OVERGROWTH_TASK_WEIGHTS = {
    "vegetation": 1.0,
    "debris": 0.8,
    "uproot": 1.2,
    "replant": 1.1,
}
OVERGROWTH_MAX_PENALTY = 0.06
OVERGROWTH_DECAY_BASE = 0.7   # Penalty approaches its max as 1 - 0.7 ** years
OVERGROWTH_MIN_MULTIPLIER = 0.5

# Planting density (vines per hectare)
DENSITY_OPTIMAL = 1500
DENSITY_MAX = 15000
DENSITY_MIN_MULTIPLIER = 0.5

# ------------------------------------------------------------------
# Prestige
# ------------------------------------------------------------------

# Vine age (years) -> base prestige modifier, interpolated linearly
VINE_AGE_PRESTIGE_CURVE = [
    (0, 0.01),
    (1, 0.02),
    (3, 0.10),
    (10, 0.26),
    (25, 0.50),
    (50, 0.80),
    (100, 0.95),
]

AGE_SUITABILITY_CEILING = 0.98
SIZE_FACTOR_SOFT_CAP_HECTARES = 5      # sqrt(ha) grows linearly up to sqrt(5)
PRESTIGE_FACTOR_DIVISOR = 500.0
PRESTIGE_FACTOR_CEILING = 0.99

# Prestige event types attached to a vineyard
VINEYARD_EVENT_TYPES = (
    "vineyard_sale",
    "vineyard_base",
    "vineyard_achievement",
    "vineyard_age",
    "vineyard_land",
    "vineyard_region",
)

# Exponential tail squash applied to land value before the asymmetric curve
SQUASH_TAIL_THRESHOLD = 0.9
SQUASH_TAIL_MAX_TARGET = 0.9999
SQUASH_TAIL_ALPHA = 8.0
