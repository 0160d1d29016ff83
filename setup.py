from setuptools import setup, find_packages

setup(
    name="max-tree",
    version="0.1.0",
    description="Utility maximizer based on a maximum tree: full, greedy and breadth search",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "numpy>=1.24.0",
            "pytest>=7.4.0",
        ],
        "examples": [
            "numpy>=1.24.0",
        ],
        "dev": [
            "black>=23.0.0",
            "mypy>=1.5.0",
            "numpy>=1.24.0",
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
)
