"""Example: distance and closest points between a parcel with a courtyard and a road."""

from geodist import DistanceOp, format_coordinate, parse_wkt

PARCEL = """
POLYGON ((0 0, 40 0, 40 30, 0 30, 0 0),
         (10 10, 30 10, 30 20, 10 20, 10 10))
"""

ROAD = "LINESTRING (-10 45, 20 38, 55 42)"

WELL = "POINT (20 15)"


def main() -> None:
    parcel = parse_wkt(PARCEL)
    for label, text in (("road", ROAD), ("well", WELL)):
        op = DistanceOp(parcel, parse_wkt(text))
        p, q = op.closest_points()
        loc_parcel, _ = op.closest_locations()
        print(f"{label}: distance={op.distance():.6f}")
        print(f"  parcel side: ({format_coordinate(p)}) on segment {loc_parcel.segment_index}")
        print(f"  {label} side: ({format_coordinate(q)})")


if __name__ == "__main__":
    main()
