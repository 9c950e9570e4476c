# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['hwethlib']

package_data = \
{'': ['*']}

install_requires = \
['eth-hash[pycryptodome]>=0.5,<1.0',
 'eth-utils>=2.0,<6.0',
 'rlp>=3.0,<5.0',
 'semver>=3.0.1,<4.0.0',
 'typing-extensions>=4.4,<5.0']

setup_kwargs = {
    'name': 'hwethlib',
    'version': '0.3.0',
    'description': 'Sign Ethereum transactions and messages with hardware wallets',
    'long_description': "# Ethereum Hardware Wallet Signing\n\nThe `hwethlib` Python library validates and normalizes Ethereum transactions and personal messages into the payloads a hardware signing device expects, sends them through a device transport, and assembles the returned `(r, s, v)` signature into a serializable signed transaction.\n\nIf the user rejects the request on the device, signing returns `None` and a warning is logged. Every other failure is raised as a subclass of `hwethlib.errors.HWWError`.\n\n## Usage\n\n```\nfrom hwethlib.signing import sign_transaction\n\nsigned = sign_transaction(transport, {\n    'derivationPath': \"m/44'/60'/0'/0/0\",\n    'gasPrice': '3e8',\n    'gasLimit': '5208',\n    'chainId': 1,\n    'nonce': '0',\n    'to': '0x3535353535353535353535353535353535353535',\n    'value': '0',\n})\nif signed is not None:\n    print(signed.hex())\n```\n\n`transport` is any object with a `send(payload)` method; see `hwethlib.transport`.\n\n## Tests\n\n```\ncd test\n./run_tests.py\n```\n\n## License\n\nThis project is available under the MIT License.\n",
    'author': 'The HWI developers',
    'maintainer': 'None',
    'maintainer_email': 'None',
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'python_requires': '>=3.8',
}


setup(**setup_kwargs)
