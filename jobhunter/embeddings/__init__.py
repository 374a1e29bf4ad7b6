"""Embeddings module with fixed-vocabulary bag-of-words vectors."""

from jobhunter.embeddings.vectorizer import (
    EMBEDDING_DIMENSION,
    VOCABULARY,
    compute_similarities_batch,
    cosine_similarity,
    embed_job,
    embed_resume,
    generate_embedding,
)

__all__ = [
    "EMBEDDING_DIMENSION",
    "VOCABULARY",
    "compute_similarities_batch",
    "cosine_similarity",
    "embed_job",
    "embed_resume",
    "generate_embedding",
]
