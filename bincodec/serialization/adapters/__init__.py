from .max_bytes import MaxBytesDeserializer, MaxBytesExceededError, MaxBytesSerializer

__all__ = [
    'MaxBytesDeserializer',
    'MaxBytesExceededError',
    'MaxBytesSerializer',
]
