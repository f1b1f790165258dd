"""Shared fixtures for core unit tests"""

import pytest

from mdfeed.core.parse import compile_document


SAMPLE_MDX = """\
import Chart from '../../components/Chart'

export const meta = {
  title: 'Exported Title',
  description: "Exported description",
  date: '2020-06-01',
};

# Heading One

First paragraph with **bold** text.

## Heading Two

<Chart />

Second paragraph.
"""

PLAIN_MD = """\
Intro paragraph before any heading.

## Not top level

# Real Title

Closing paragraph.
"""


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return compile_document(SAMPLE_MDX)


@pytest.fixture(name="plain_doc")
def plain_doc_fixture():
    return compile_document(PLAIN_MD)
