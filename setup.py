"""Setup script for the molecules package."""

from pathlib import Path

from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    reqs_path = Path(__file__).parent / "requirements.txt"
    if not reqs_path.exists():
        return []
    return [
        line.strip()
        for line in reqs_path.read_text().splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]


setup(
    name="molecules",
    version="0.0.1",
    description="Empirical formula algebra and indexed amino acid residue libraries.",
    author="",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    include_package_data=True,
)
