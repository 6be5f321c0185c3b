from setuptools import setup, find_packages
import os

base_dir = os.path.dirname(__file__)  # Directory of the script
requirements_path = os.path.join(base_dir, 'requirements.txt')

with open(requirements_path) as f:
    required = f.read().splitlines()

setup(name='mcQuadrature',
      version='0.1',
      description='Crude Monte Carlo and importance sampling integration on [0, 1)',
      license='MIT',
      packages=find_packages(include=['mcQuadrature', 'mcQuadrature.*']),
      install_requires=required,
      extras_require={'test': ['pytest']},
      include_package_data=True,
      zip_safe=False)
