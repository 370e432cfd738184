from rental_agency import create_app
from rental_agency.models.store import Store
from rental_agency.services.fleet_service import FleetService

# Demo fleet in record-line format (see Agency.parse_line).
DEMO_LINES = [
    "C,4532MNT,Seat,Ibiza,35.5,5",
    "C, 1234ABC , Renault , Clio , 32 , 5",
    "F,9999ZZZ,Ford,Transit,60,12.5",
    "C,7812KLP,Seat,Leon,42,5",
    "F,3344GHJ,Renault,Master,75,10.8",
    "C,2211BBC,Volkswagen,Touran,55,7",
    "F,6655DDF,Volkswagen,Crafter,80,14",
    "c,4532mnt,seat,ibiza,35.5,5",
    "C,0001XYZ,Ford,Focus,not-a-price,5",
]


def main():
    app = create_app()
    with app.app_context():
        store = Store.instance()
        result = store.load(DEMO_LINES)

        print(FleetService.fleet_text())
        print()
        print(FleetService.cars_report(7))
        print()
        print(f"Loaded {result.loaded}, duplicates {result.duplicates}, rejected {len(result.failures)}")
        for f in result.failures:
            print(f"  line {f.line_no}: {f.line!r} -> {f.reason}")


if __name__ == "__main__":
    main()
