import sys

from .config import Colours, DEFAULT_WIDTH_MILES
from .models import Coordinate, parse_coordinate
from .services.distance import DistanceService


def prompt_coordinate(label: str) -> Coordinate:
    raw = input(f"{label} (lat, lon): ").strip()
    try:
        return parse_coordinate(raw)
    except ValueError as exc:
        sys.exit(str(exc))


def prompt_width() -> float:
    raw = input(f"Box width in miles [{DEFAULT_WIDTH_MILES:g}]: ").strip()
    if not raw:
        return DEFAULT_WIDTH_MILES
    try:
        return float(raw)
    except ValueError:
        sys.exit(f"Width must be a number, got {raw!r}.")


def main() -> None:
    service = DistanceService()

    # ------------------------------------------------------------------
    # 1️⃣ Distance between two points
    # ------------------------------------------------------------------
    start = prompt_coordinate("Start")
    end = prompt_coordinate("End")
    miles = service.get_distance_between_points(start, end)
    print(f"\nDistance: {Colours.BOLD}{miles:.2f} miles{Colours.RESET}")

    # ------------------------------------------------------------------
    # 2️⃣ Bounding box around the start point
    # ------------------------------------------------------------------
    width = prompt_width()
    box = service.get_bounding_box(start, width)
    print(
        f"\nBox around {start.latitude:.4f}, {start.longitude:.4f} "
        f"({width:g} mi each side):"
    )
    print(f"\t{Colours.CYAN}min{Colours.RESET} {box.min_latitude:.6f}, {box.min_longitude:.6f}")
    print(f"\t{Colours.RED}max{Colours.RESET} {box.max_latitude:.6f}, {box.max_longitude:.6f}")

    if not box.contains(end):
        print(f"{Colours.YELLOW}End point lies outside the box.{Colours.RESET}")
    else:
        print(f"{Colours.GREEN}End point lies inside the box.{Colours.RESET}")


if __name__ == "__main__":
    main()
