"""
reset_data.py
-------------
Utility script to clear all stored data (customers, rentals) from the local data file.

This script is designed for development and testing purposes.
It resets the Store instance to an empty state, then saves it back to disk.

Usage:
    $ python reset_data.py

After running this script, you can repopulate sample data by executing:
    $ python seeds.py
"""

from dailyrental.models.store import Store


def main():
    """
    Clear all customers and rentals from the persistent store and save the
    empty store back to disk.
    """
    store = Store.instance()
    store.clear()
    store.save()

    print("Store has been successfully cleared.")
    print("Tip: Run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
