"""Pydeck rendering boundary.

Binds a MultiPolyline to deck.gl layers:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- One PathLayer row per drawable segment (two or more points)
"""

from typing import Optional

import pydeck as pdk

from geodesic_polyline.constants import MapConfig, StyleConfig
from geodesic_polyline.model.multi_polyline import MultiPolyline
from geodesic_polyline.model.path_options import DisplayOptions


def path_layer_data(multi_polyline: MultiPolyline, display: Optional[DisplayOptions] = None) -> list[dict]:
    """Prepare PathLayer rows, one per drawable segment.

    Returns:
        List of {"path": [[lon, lat], ...], "color": [r, g, b, a], "segment": index}
    """
    display = display or DisplayOptions()
    return [
        {"path": coords.tolist(), "color": list(display.color), "segment": idx}
        for idx, coords in enumerate(multi_polyline.as_arrays())
        if len(coords) > 1
    ]


def build_path_layer(
    multi_polyline: MultiPolyline,
    display: Optional[DisplayOptions] = None,
    layer_id: str = StyleConfig.LAYER_ID,
) -> pdk.Layer:
    """Create a PathLayer drawing every segment of the MultiPolyline."""
    display = display or DisplayOptions()
    return pdk.Layer(
        "PathLayer",
        path_layer_data(multi_polyline=multi_polyline, display=display),
        get_path="path",
        get_color="color",
        get_width=display.width_px,
        width_units="pixels",
        width_min_pixels=1,
        opacity=display.opacity,
        pickable=True,
        id=layer_id,
    )


def build_deck(multi_polyline: MultiPolyline, display: Optional[DisplayOptions] = None) -> pdk.Deck:
    """Create a Deck centered on the first point of the MultiPolyline (0, 0 if empty)."""
    first = next((segment[0] for segment in multi_polyline if segment), None)
    view_state = pdk.ViewState(
        latitude=first.lat if first else 0.0,
        longitude=first.lon if first else 0.0,
        zoom=MapConfig.DEFAULT_ZOOM,
        pitch=MapConfig.DEFAULT_PITCH,
    )
    return pdk.Deck(
        map_style=MapConfig.MAP_STYLE,
        initial_view_state=view_state,
        layers=[build_path_layer(multi_polyline=multi_polyline, display=display)],
    )
