#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromokinesis/__main__.py

from chromokinesis.main import main

main()
