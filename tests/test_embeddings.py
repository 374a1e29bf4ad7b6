"""Tests for vocabulary embeddings and cosine similarity."""

import numpy as np

from jobhunter.embeddings import (
    EMBEDDING_DIMENSION,
    VOCABULARY,
    compute_similarities_batch,
    cosine_similarity,
    embed_job,
    embed_resume,
    generate_embedding,
)
from tests.test_utils import make_test_job, make_test_resume


class TestGenerateEmbedding:
    def test_returns_numpy_array(self):
        result = generate_embedding("python developer")
        assert isinstance(result, np.ndarray)
        assert result.shape == (EMBEDDING_DIMENSION,)

    def test_unit_length(self):
        result = generate_embedding("senior python engineer with aws and docker experience")
        assert np.isclose(np.linalg.norm(result), 1.0)

    def test_no_vocabulary_terms_gives_zero_vector(self):
        result = generate_embedding("gardening and cooking")
        assert not result.any()

    def test_empty_text_gives_zero_vector(self):
        assert not generate_embedding("").any()

    def test_only_vocabulary_dimensions_set(self):
        result = generate_embedding("python python kotlin")
        python_index = VOCABULARY.index("python")
        kotlin_index = VOCABULARY.index("kotlin")

        nonzero = set(np.flatnonzero(result))

        assert nonzero == {python_index, kotlin_index}
        assert result[python_index] > result[kotlin_index]

    def test_deterministic(self):
        text = "React frontend developer"
        assert np.array_equal(generate_embedding(text), generate_embedding(text))


class TestCosineSimilarity:
    def test_same_vector_is_one(self):
        vec = generate_embedding("python backend engineer")
        assert np.isclose(cosine_similarity(vec, vec), 1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_zero_vector_is_zero(self):
        assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0

    def test_length_mismatch_is_zero(self):
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0

    def test_opposite_vectors(self):
        assert np.isclose(cosine_similarity([1.0, 0.0], [-1.0, 0.0]), -1.0)


class TestComputeSimilaritiesBatch:
    def test_multiple_items(self):
        query = np.array([1.0, 0.0, 0.0])
        matrix = np.array([
            [1.0, 0.0, 0.0],  # identical
            [0.0, 1.0, 0.0],  # orthogonal
            [0.5, 0.5, 0.0],  # partial
        ])

        result = compute_similarities_batch(query, matrix)

        assert len(result) == 3
        assert np.isclose(result[0], 1.0)
        assert np.isclose(result[1], 0.0)
        assert 0 < result[2] < 1

    def test_zero_rows_score_zero(self):
        result = compute_similarities_batch(np.array([1.0, 0.0]), np.array([[0.0, 0.0]]))
        assert np.isclose(result[0], 0.0)

    def test_empty_matrix(self):
        assert len(compute_similarities_batch(np.array([1.0]), [])) == 0


class TestEmbedEntities:
    def test_resume_and_job_share_space(self):
        resume = make_test_resume(skills=["Python", "AWS"], raw_text="Backend engineer")
        job = make_test_job(title="Backend Engineer", skills=["Python", "AWS"])

        similarity = cosine_similarity(embed_resume(resume), embed_job(job))

        assert similarity > 0.9

    def test_unrelated_job(self):
        resume = make_test_resume(skills=["Python"], raw_text="python python")
        job = make_test_job(title="Chef", description="cooking kitchen")

        assert cosine_similarity(embed_resume(resume), embed_job(job)) == 0.0
