import os

from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Score composition (must sum to 1.0)
SCORE_WEIGHTS = {
    "skills": 0.35,
    "experience": 0.25,
    "keywords": 0.20,
    "location": 0.10,
    "seniority": 0.10,
}

# Matching settings
NEUTRAL_SKILL_SCORE = 50.0  # Used when a job lists no skills
DEFAULT_EXPERIENCE_YEARS = 2.0  # Assumed for entries without both dates
TITLE_MATCH_BONUS = 15
MAX_RECOMMENDATIONS = 3

# Result selection
DEFAULT_TOP_N = int(os.getenv("JOBHUNTER_TOP_N", "10"))
MIN_MATCH_SCORE = int(os.getenv("JOBHUNTER_MIN_SCORE", "0"))

# Resume parsing
MIN_RESUME_TEXT_LENGTH = 50
