DEFAULT_DATABASE = '(default)'
DEFAULT_BATCH_SIZE = 5
# Firestore rejects write batches with more than 500 operations
MAX_BATCH_SIZE = 500
