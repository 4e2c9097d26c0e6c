"""Default configuration constants for the Zoo Enclosure Planner."""

# Biome tags known to the zoo
BIOMES = ["savana", "floresta", "rio"]

# Compound descriptors join two tags with this separator ("savana e rio")
COMPOUND_BIOME_SEPARATOR = " e "

# The single dual-biome descriptor; hippos only share an enclosure of this kind
DUAL_BIOME = "savana e rio"
HIPPO_SPECIES = "HIPOPOTAMO"

# Reserved once when a new species joins an occupied enclosure
MIXED_SPECIES_EXTRA_SPACE = 1

# Analysis error tags
ERROR_INVALID_SPECIES = "invalid species"
ERROR_INVALID_QUANTITY = "invalid quantity"
ERROR_NO_VIABLE_ENCLOSURE = "no viable enclosure"

# User-facing messages for each error tag
ERROR_MESSAGES = {
    ERROR_INVALID_SPECIES: "Animal inválido",
    ERROR_INVALID_QUANTITY: "Quantidade inválida",
    ERROR_NO_VIABLE_ENCLOSURE: "Não há recinto viável",
}

# Display line for a viable enclosure
VIABLE_ENCLOSURE_TEMPLATE = "Recinto {enclosure_id} (espaço livre: {free_space} total: {total_capacity})"

# Quantity selector bounds in the UI
MIN_QUANTITY = 1
MAX_QUANTITY = 20
DEFAULT_QUANTITY = 1

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Enclosure occupancy alert threshold (share of capacity in use)
ENCLOSURE_SATURATION_THRESHOLD = 0.90

# Accepted truthy spellings for the carnivore column
TRUTHY_VALUES = {"yes", "y", "true", "1", "sim", "s"}
FALSY_VALUES = {"no", "n", "false", "0", "nao", "não", ""}
