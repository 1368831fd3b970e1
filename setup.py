from setuptools import setup, find_packages

setup(
    name="step_pipeline",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy>=1.21.0',
        'pandas>=1.3.0',
        'scipy>=1.7.0',
        'matplotlib>=3.4.0'
    ],
    extras_require={
        'test': ['pytest>=7.0.0']
    }
)
