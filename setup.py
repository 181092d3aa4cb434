
from setuptools import setup

setup(
    name =             "drawer",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Persistent panels across the workspaces of a window host",
    license =          "BSD",
    packages =         ['drawer', 'drawer.hosts'],
    python_requires =  ">=3.6",
    extras_require =   {'test': ['pytest']},
)
