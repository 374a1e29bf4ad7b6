"""Bag-of-words text embeddings over a fixed technology vocabulary.

Vectors have one dimension per vocabulary term, weighted by
log(1 + count) / log(1 + total tokens) and L2-normalized. They are cheap,
deterministic and comparable with cosine similarity, but carry no learned
semantics.
"""

import math
from collections import Counter

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine_similarity

from jobhunter.matching.tokenizer import tokenize
from jobhunter.schemas.job import Job
from jobhunter.schemas.resume import Resume

VOCABULARY = (
    "javascript", "python", "react", "node", "aws", "docker", "kubernetes",
    "sql", "api", "frontend", "backend", "fullstack", "data", "machine",
    "learning", "cloud", "devops", "agile", "scrum", "design", "product",
    "manager", "engineer", "developer", "senior", "junior", "lead", "team",
    "experience", "skills", "project", "system", "software", "web", "mobile",
    "database", "security", "testing", "deployment", "integration", "performance",
    "optimization", "architecture", "microservices", "rest", "graphql", "typescript",
    "java", "go", "rust", "scala", "ruby", "php", "swift", "kotlin",
)

EMBEDDING_DIMENSION = len(VOCABULARY)


def generate_embedding(text: str) -> np.ndarray:
    """Project text onto the fixed vocabulary.

    Args:
        text: Free text to embed.

    Returns:
        Unit-length vector of shape (EMBEDDING_DIMENSION,), or the zero
        vector when no vocabulary term occurs in the text.
    """
    tokens = tokenize(text)
    counts = Counter(tokens)
    denominator = math.log(1 + len(tokens)) if tokens else 1.0

    embedding = np.array(
        [math.log(1 + counts[word]) / denominator if counts[word] else 0.0 for word in VOCABULARY]
    )

    magnitude = np.linalg.norm(embedding)
    if magnitude > 0:
        return embedding / magnitude
    return embedding


def cosine_similarity(a, b) -> float:
    """Cosine similarity between two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        Similarity in [-1, 1]; 0 when lengths differ or either vector is zero.
    """
    vec_a = np.asarray(a, dtype=float)
    vec_b = np.asarray(b, dtype=float)
    if vec_a.shape != vec_b.shape:
        return 0.0

    magnitude = np.linalg.norm(vec_a) * np.linalg.norm(vec_b)
    if magnitude == 0:
        return 0.0
    return float(np.dot(vec_a, vec_b) / magnitude)


def compute_similarities_batch(embedding, embeddings) -> np.ndarray:
    """Compute cosine similarity between one vector and many.

    Args:
        embedding: Query vector (1D).
        embeddings: Matrix of vectors (n_items, n_features).

    Returns:
        Array of similarity scores (n_items,). Zero vectors score 0.
    """
    matrix = np.asarray(embeddings, dtype=float)
    if matrix.size == 0:
        return np.zeros(0)

    # Sklearn expects 2D arrays (samples, features)
    return sklearn_cosine_similarity(
        np.asarray(embedding, dtype=float).reshape(1, -1),
        matrix,
    )[0]


def resume_embedding_text(resume: Resume) -> str:
    """Text used to embed a resume: raw text plus skills."""
    return f"{resume.raw_text} {' '.join(resume.skills)}"


def job_embedding_text(job: Job) -> str:
    """Text used to embed a job: title, description and skills."""
    return f"{job.title} {job.description} {' '.join(job.skills)}"


def embed_resume(resume: Resume) -> np.ndarray:
    """Generate the embedding vector for a resume."""
    return generate_embedding(resume_embedding_text(resume))


def embed_job(job: Job) -> np.ndarray:
    """Generate the embedding vector for a job posting."""
    return generate_embedding(job_embedding_text(job))
