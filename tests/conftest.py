import pytest

from pyinicfg import ConfigStore, IniParser

SAMPLE_INI = """
# comment: text
  ; indented_comment: text

[service]
base: system-image.ubuntu.com
http_port: 80
https_port: 443
channel: ubuntu-core/devel-proposed
device: generic_amd64
build_number: 246
version_detail: ubuntu=20150121,raw-device=20150121,version=246

[foo]
bar: baz
yesbool: On
nobool: off
float: 3.14
no_interpolation: %%no

[testOptions]
One: 1
Two: 2
"""


@pytest.fixture
def sample_ini() -> str:
    return SAMPLE_INI


@pytest.fixture
def cfg() -> ConfigStore:
    return IniParser.read_string(SAMPLE_INI)
