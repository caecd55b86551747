class NotInitializedError(Exception):
    def __init__(self) -> None:
        super().__init__('The document store connection has not been initialized, call connect() first.')


class InvalidBatchSizeError(ValueError):
    def __init__(self, batch_size: object, max_batch_size: int) -> None:
        self.batch_size = batch_size
        self.max_batch_size = max_batch_size
        super().__init__(f'Batch size must be an integer between 1 and {max_batch_size}, got {batch_size!r}.')
