from enum import Enum

class GenerationStage(str, Enum):
    ANALYZE = "ANALYZE"
    COMPONENTS = "COMPONENTS"
    HOOKS = "HOOKS"
    UTILS = "UTILS"
    TYPES = "TYPES"
    CONFIG = "CONFIG"
    BACKEND = "BACKEND"
    DEPLOYMENT = "DEPLOYMENT"
    DONE = "DONE"
