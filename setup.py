from setuptools import setup, find_namespace_packages

setup(
    name="grid_matrix",
    version="0.1.0",
    packages=find_namespace_packages(include=["grid_matrix", "grid_matrix.*"]),
    package_data={"grid_matrix": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
