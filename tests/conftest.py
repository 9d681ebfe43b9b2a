"""
Shared fixtures for World.ini tests.

Sample files are raw Windows-1252 bytes, just like the game ships them.
"""
import pytest

from pyknytt import parse


SAMPLE_WORLD = (
    b'[World]\r\n'
    b'Name=The Machine\r\n'
    b'Author=Nifflas\r\n'
    b'Description=Caf\xe9 \x93quotes\x94 \x80 5\r\n'
    b'Format=2\r\n'
    b'\r\n'
    b'[Custom Object 1]\r\n'
    b'Image=Bank1.png\r\n'
    b'Tile Width=24\r\n'
    b'Tile Height=24\r\n'
    b'\r\n'
    b'[x1000y1000]\r\n'
    b'ShiftVisible(A)=False\r\n'
    b'ShiftEffect(A)=False\r\n'
    b'ShiftSound(A)=None\r\n'
    b'[x1001y1000]\r\n'
    b'Sign(A)=Hello there\r\n'
)

# the kind of file level editors and hand edits leave behind.
SAMPLE_MESSY = (
    b'Stray=before any header\n'
    b'; made with some editor\r'
    b'[WORLD]\n'
    b'  Name  =  The Machine  \n'
    b'[World] oops\n'
    b'Author=Someone\n'
    b'[x1000y1000\n'
    b'this line means nothing\n'
    b'[world]\r\n'
    b'name=Renamed\n'
    b'# Format=9\n'
    b'Equation=a=b=c\n'
    b'    \t   \n'
    b'[]\n'
    b'Back=on top'
)


@pytest.fixture
def sample_doc():
    return parse(SAMPLE_WORLD)


@pytest.fixture
def messy_doc():
    return parse(SAMPLE_MESSY)
