from scripts.config import *  # noqa: F403, F401

__all__ = [
    'RANDOM_STATE',
    'N_ROWS',
    'TEST_SIZE',
    'FEATURE_GROUPS',
    'FEATURE_NAMES',
    'CONTINUOUS_COLUMNS',
    'CATEGORICAL_COLUMNS',
    'N_CATEGORY_LEVELS',
    'TARGET_NAMES',
    'MODEL_FAMILIES',
    'PREP_STEPS',
    'OUTPUT_DIR',
    'PREVIEW_ROWS',
    'get_space',
]
