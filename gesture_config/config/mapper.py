"""
Gesture mapper.

Walks the generic node tree and emits one GestureConfigRecord per
(application, gesture) pair:

    <touchegg>
      <application name="Google-chrome,Chromium-browser">
        <gesture type="SWIPE" fingers="3" direction="LEFT">
          <action type="SEND_KEYS">
            <keys>Alt+Left</keys>
          </action>
        </gesture>
      </application>
    </touchegg>

yields two records, one for each application name.
"""

import logging
from typing import Dict, List

from ..models import GestureConfigRecord, XmlNode
from ..store import GestureStore

logger = logging.getLogger(__name__)

APPLICATION_TAG = "application"
GESTURE_TAG = "gesture"
ACTION_TAG = "action"
APPLICATION_SEPARATOR = ","


def split_applications(names: str) -> List[str]:
    """Split a comma-separated application list. Whitespace is kept as-is."""
    return names.split(APPLICATION_SEPARATOR)


def read_settings(action: XmlNode) -> Dict[str, str]:
    """Collect action children as settings; later duplicates win."""
    settings: Dict[str, str] = {}
    for setting in action.children:
        settings[setting.tag] = setting.text or ""
    return settings


def map_records(root: XmlNode) -> List[GestureConfigRecord]:
    """
    Build gesture records from a parsed configuration tree.

    Gestures without an <action> child are skipped with a warning.

    Args:
        root: Root node of the configuration document

    Returns:
        Records in document order
    """
    records: List[GestureConfigRecord] = []

    for application_node in root.children_named(APPLICATION_TAG):
        applications = split_applications(application_node.attribute("name"))

        for gesture_node in application_node.children_named(GESTURE_TAG):
            gesture_type = gesture_node.attribute("type")
            fingers = gesture_node.attribute("fingers")
            direction = gesture_node.attribute("direction")

            action_node = gesture_node.first_child(ACTION_TAG)
            if action_node is None:
                logger.warning(
                    f"Skipping gesture without action: application="
                    f"{application_node.attribute('name')!r} type={gesture_type!r} "
                    f"fingers={fingers!r} direction={direction!r}"
                )
                continue

            action_type = action_node.attribute("type")
            settings = read_settings(action_node)

            for application in applications:
                records.append(GestureConfigRecord(
                    application=application,
                    gesture_type=gesture_type,
                    fingers=fingers,
                    direction=direction,
                    action_type=action_type,
                    settings=dict(settings),
                ))

    return records


def add_records(records: List[GestureConfigRecord], store: GestureStore) -> int:
    for record in records:
        store.add_record(
            record.application,
            record.gesture_type,
            record.fingers,
            record.direction,
            record.action_type,
            dict(record.settings),
        )
    return len(records)


def map_into(root: XmlNode, store: GestureStore) -> int:
    """
    Map a configuration tree straight into a store.

    Returns:
        Number of records added
    """
    return add_records(map_records(root), store)
