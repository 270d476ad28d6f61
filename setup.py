from setuptools import setup, find_packages

setup(
    name="argumentative",
    version="0.1.0",
    description="Typed command-line flag registry and parser.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="The Argumentative Authors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "prompt_toolkit>=3.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
