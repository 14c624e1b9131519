"""Example host loop: explode markers, react to parameter edits and clicks."""

from spiderfy import EventHandlers, LayoutParameters, Spiderifier

STOPS = [
    {"name": "Bakery", "leg_style": {"stroke": "#c0392b"}},
    {"name": "Pharmacy"},
    None,
    {"name": "Bookshop"},
    {"name": "Cafe"},
]


def on_click(marker, record):
    print(f"clicked {marker['name']} at ({record.x:.1f}, {record.y:.1f})")


def main() -> None:
    spider = Spiderifier((13.405, 52.52), STOPS, handlers=EventHandlers(on_click=on_click))
    for placement in spider.placements():
        record = placement.record
        print(
            f"{placement.marker['name']:<10} angle={record.angle:.3f} leg={record.leg_length:.1f} "
            f"delay={record.transition_delay:.2f}s leg_style={placement.leg_style}"
        )

    relaid = spider.update(params=LayoutParameters(animation_speed=900))
    print(f"animation speed change recomputed layout: {relaid}")
    relaid = spider.update(params=LayoutParameters(circle_spiral_switchover=0))
    print(f"switchover change recomputed layout: {relaid}")

    spider.dispatch("click", 2)


if __name__ == "__main__":
    main()
