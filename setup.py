from setuptools import setup, find_packages

setup(
    name="c4engine",
    version="0.1.0",
    description="Connect Four engine with an alpha-beta minimax computer opponent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # ConnectFourEnv front end
    ],
    extras_require={
        "test": ["pytest"],
    },
)
