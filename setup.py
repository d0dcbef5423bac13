import re

from setuptools import find_packages, setup

with open("src/starkcrypto/__about__.py") as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

if __name__ == "__main__":
    setup(
        name="starkcrypto",
        version=version,
        description="StarkEx client cryptography: STARK keys, Pedersen hash, order and transfer signing",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        extras_require={"test": ["pytest"]},
    )
