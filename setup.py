from setuptools import find_packages, setup

setup(
    name="strext",
    version="1.0.0",
    description="Small string helpers: affix trimming, needle splitting, joining and LF line handling",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
)
