import os
from setuptools import setup, find_packages

about = {}
with open(os.path.join("python", "jubhash", "__about__.py")) as f:
    exec(f.read(), about)


setup(
    name="jubhash",
    version=about["__version__"],
    packages=find_packages(where="python"),
    package_dir={
        "": "python",
    },
    install_requires=[
        "mpyc",
    ],
    extras_require={
        "test": ["pytest"],
        "extra": ["numpy"],
    },
    python_requires=">=3.11",
    include_package_data=True,
    zip_safe=False,
)
