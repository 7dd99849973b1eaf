"""Run with: python -m packcalc"""
from packcalc.main import main

if __name__ == "__main__":
    main()
