#!/usr/bin/env python3
"""
Dynamic Footsteps - alternating left/right footstep sounds driven by terrain.

This is the entry point for the demo. Project layout:

- systems/   - Footstep engine (suppression, terrain profiles, conditions,
               foot alternation, mixing)
- audio/     - Audio sink interface, FMOD playback, debug logging
- state/     - Constants, configuration loading, game state
- ui/        - Keyboard input
- utils/     - Utility functions

Usage:
    python steps.py [footsteps.json]
"""

from main import main

if __name__ == '__main__':
    main()
