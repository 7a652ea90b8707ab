from setuptools import setup, find_packages

setup(
    name = "streamreducer",
    version = "0.1",
    packages = find_packages(exclude=['tests']),
    include_package_data = True,
    install_requires = [
        "numpy",
        "configobj >= 5.0.6",
    ],
    extras_require = {
        'test': ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'streamreducer = streamreducer.sreduce:main',
        ],
    },

    # metadata for upload to PyPI
    author = "The StreamReducer Team",
    description = "Online Douglas-Peucker reduction of sensor time series and GPS tracks",
    license = "GPL",
)
