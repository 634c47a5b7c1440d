import setuptools

setuptools.setup(
    name="propparse",
    version="0.1.0",
    license="MIT License",
    description="Parser for key: \"value\" properties built on parser "
                "combinators",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.7",
    install_requires=["typing_extensions"],
    extras_require={
        "test": ["pytest"],
        "bench": ["pyperf"],
    },
    entry_points={
        "console_scripts": ["propparse=propparse.__main__:main"],
    },
    zip_safe=False,
)
