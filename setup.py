from setuptools import find_packages, setup


setup(
    name="roamy",
    version="0.1.0",
    description="Line fixer plugin for markdown note editors: bulleted headings, separators and indented bullets",
    author="Roamy",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
)
