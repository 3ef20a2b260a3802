from setuptools import setup

setup(name="pybisect",
      version="1.0.0",
      description="pybisect",
      long_description="Binary search and sorted insertion for python sequences, with sub-range and comparator variants",
      license="GPLv2+",
      packages=["pybisect"],
      package_dir={"" : "src"},
      scripts=["src/bin/bisect-cli"],
      python_requires=">=3.8",
      install_requires=["toml", "tomli>=2.1"],
      extras_require={"test": ["pytest", "hypothesis"]},
      )
