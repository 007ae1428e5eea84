from .euclidean import EuclideanReducer
from .stein import SteinReducer

__all__ = [
    'EuclideanReducer',
    'SteinReducer'
]
