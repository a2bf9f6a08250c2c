from setuptools import setup, find_packages

setup(
    name="workout_progress",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "workout-progress=workout_progress.cli:main",
        ],
    },
    python_requires=">=3.9",
)
