from setuptools import setup, find_packages

setup(
    name="lfa-lib",
    version="0.1.0",
    description="Linear function approximation for reinforcement learning",
    packages=find_packages(include=["lfa_lib", "lfa_lib.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
