import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="gifstruct",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Decoding of the structure of GIF files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/gifstruct",
    packages=setuptools.find_packages(exclude=["tests"]),
    scripts=["scripts/gifinfo.py"],
    install_requires=[
        'bitstring',
        'pillow',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
