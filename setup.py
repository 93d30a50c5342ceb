from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="repo-conventions",
    version="0.1.0",
    description="Convention checks for license headers, script preambles and naming style",
    packages=find_packages(include=["conventions", "conventions.*"]),
    py_modules=["check_conventions"],
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
)
