from setuptools import setup, find_packages

setup(
    name="mcts-poker-squares",
    version="0.1.0",
    description="Time-boxed MCTS player for Poker Squares card placement",
    author="",
    author_email="",
    packages=find_packages(include=["src", "src.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
        "dev": [
            "black>=23.0.0",
            "mypy>=1.5.0",
        ],
    },
)
