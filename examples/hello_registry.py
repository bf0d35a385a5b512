import time

import donation_registry
from donation_registry import BURN_PRINCIPAL


def main() -> None:
    server = donation_registry.run(port=0, new_server=True)
    restaurant = server.client("ST1RESTAURANT")
    food_bank = restaurant.as_principal("ST4FOODBANK")

    restaurant.set_authority_contract("ST2AUTHORITY").unwrap()

    res = restaurant.register_donation(
        b"\x01\x02\x03",
        "perishable",
        100,
        "Fresh veggies from the evening prep",
        "CityZ",
        "STX",
        expiry=restaurant.get_block_height() + 144,
    )
    donation_id = res.unwrap()
    print("registered donation", donation_id)

    # Same content twice is rejected.
    dup = restaurant.register_donation(b"\x01\x02\x03", "perishable", 100, "", "CityZ", "STX", 1000)
    print("duplicate ->", dup.kind.label)

    # Only the owner may change the record.
    print("food bank update ->", food_bank.update_donation(donation_id, "canned", 5).kind.label)
    print("burn recipient ->", restaurant.assign_recipient(donation_id, BURN_PRINCIPAL).kind.label)

    restaurant.mine(3)
    restaurant.update_donation(donation_id, "non-perishable", 80).unwrap()
    restaurant.assign_recipient(donation_id, "ST4FOODBANK").unwrap()

    print(restaurant.get_donation(donation_id))
    print(restaurant.get_donation_update(donation_id))
    print(restaurant.transfers())

    print(f"API at {server.url}docs (Ctrl+C to stop)")
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
