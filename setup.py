from setuptools import setup, find_packages

setup(
    name="sparqlRdb",
    version="0.1.0",
    description="SPARQL endpoint query client and GA4GH graph RDB to RDF converter",
    packages=find_packages(include=["sparqlRdb", "sparqlRdb.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "requests>=2.31.0",
        "rdflib>=6.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "requests-mock>=1.11",
            "pytest-socket>=0.6",
        ],
    },
    entry_points={
        "console_scripts": [
            "sparql=sparqlRdb.cli:main",
            "rdb2rdf=sparqlRdb.cli:rdb2rdf_main",
        ],
    },
    license="MIT",
)
