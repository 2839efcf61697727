#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Dispatch every sample parameter file against one endpoint.

Start ``stub_services.py`` first; both examples default to 127.0.0.1:50051.
"""

import os
from pathlib import Path

from cloudops import ParameterSet, render_outcome, run_dispatch
from cloudops.core.config import create_config
from cloudops.core.utils.logger import configure_logging

ADDRESS = os.getenv("CLOUDOPS_STUB_ADDRESS", "127.0.0.1:50051")
PROPERTIES_DIR = Path(__file__).resolve().parent / "properties"


def main() -> None:
    configure_logging("warning")
    config = create_config(address=ADDRESS, module_address=ADDRESS, call_timeout=30)

    for path in sorted(PROPERTIES_DIR.glob("*.properties")):
        outcome = run_dispatch(ParameterSet.from_properties_file(path), config=config)
        print(f"== {path.name}")
        print(render_outcome(outcome).text)


if __name__ == "__main__":
    main()
