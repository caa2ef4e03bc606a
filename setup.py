from setuptools import setup, find_packages

# Minimal setup.py for editable installs (pip install -e .)
setup(
    name="chanlik",
    version="0.1.0",
    description="Channel likelihood models P(output | input) for decoders",
    packages=find_packages(exclude=("tests", "experiments", "visualization", "configs", "runs", "docs")),
    python_requires=">=3.10",
    install_requires=[
        "torch",
        "numpy",
        "pyyaml",
        "matplotlib",
        "seaborn",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
