from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="ArrayList",
    version=version,
    description="A python list augmented with Kotlin-like collection helpers",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    keywords=['list', 'collection', 'sequence', 'functional', 'kotlin'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
