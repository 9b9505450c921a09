"""Cosine similarity between embedding vectors."""

import math


def cosine_similarity(vec_a: list[float], vec_b: list[float]) -> float:
    """
    Dot product over the product of Euclidean norms.
    A zero vector has no direction; its similarity to anything is 0.0.
    """
    if len(vec_a) != len(vec_b):
        raise ValueError(f"Vector dimensions differ: {len(vec_a)} != {len(vec_b)}")
    dot = sum(a * b for a, b in zip(vec_a, vec_b))
    norm_a = math.sqrt(sum(a * a for a in vec_a))
    norm_b = math.sqrt(sum(b * b for b in vec_b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (norm_a * norm_b)


def adjacent_similarities(vectors: list[list[float]]) -> list[float]:
    """Similarity of each vector to the next one: n vectors give n-1 scores."""
    return [cosine_similarity(vectors[i], vectors[i + 1]) for i in range(len(vectors) - 1)]
