from pathlib import Path

from ats_checker.pipeline.normalizer import normalize

SAMPLE_JD = """We are seeking a Front-End Developer with 2+ years experience.
Responsibilities:
- Build responsive UIs with HTML, CSS, JavaScript and React
- Collaborate with designers and backend engineers
- Optimize performance and accessibility
Requirements:
- Proficiency with React, TypeScript, and modern CSS (Flexbox, Grid)
- Experience with REST APIs, Git, and testing (Jest)
- Bonus: Next.js, Tailwind, CI/CD (GitHub Actions)
"""


def parse_jd(text: str) -> str:
    """Clean and normalize job description text."""
    return normalize(text)


def load_jd_file(file_path: str | Path) -> str:
    """Load JD from a text file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Job description file not found: {path}")
    return parse_jd(path.read_text(encoding="utf-8"))
