import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="euclid3d",
    version="0.1",
    description="Points, lines, and cubes in 3D space, with tolerance-aware equality",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "numpy",
        "numpydoc_decorator",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
