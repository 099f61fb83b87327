"""Group a flat, notes-parsed slide list into sections and topics.

Two policies are available:

- sectioned (default): a slide with exactly one content line, or an explicit `section`
  header, starts a new section. Inside a section, consecutive slides with the same topic
  name share a topic.
- section per topic: no section boundaries at all; every topic gets its own unnamed section.

E.g. with the sectioned policy:

    ["Intro"]              -> SECTION "Intro", TOPIC "Intro"
    ["Intro", "more"]      ->                  (same topic)
    ["Next"]               -> SECTION "Next",  TOPIC "Next"
"""

import logging
from dataclasses import dataclass

from deck2outline.internals.run_context import get_parse_run_id
from deck2outline.models import Section, Slide, Topic

log = logging.getLogger("deck2outline")


# region outline states
@dataclass(frozen=True)
class Idle:
    """No section open yet (or the previous one was just closed)."""


@dataclass(frozen=True)
class SectionOpen:
    """A section is open but has no open topic."""

    section: Section


@dataclass(frozen=True)
class TopicOpen:
    """A section and one of its topics are open."""

    section: Section
    topic: Topic


OutlineState = Idle | SectionOpen | TopicOpen
# endregion


# region build_outline Orchestrator
def build_outline(slides: list[Slide], section_per_topic: bool = False) -> list[Section]:
    """Build the section/topic outline for a deck with the requested grouping policy."""
    if section_per_topic:
        sections = build_section_per_topic_outline(slides)
    else:
        sections = build_sectioned_outline(slides)

    log.info(
        f"Grouped {len(slides)} slides into {len(sections)} sections. [run:{get_parse_run_id()}]"
    )
    return sections


# endregion


# region naming helpers
def section_name(slide: Slide) -> str:
    """A section is named after its first slide's first line, unless the notes set `section`."""
    if slide.section is not None:
        return slide.section
    return slide.first_line


def topic_name(slide: Slide) -> str:
    """A slide's topic name: its first line, unless the notes set `topic`."""
    if slide.topic is not None:
        return slide.topic
    return slide.first_line


def starts_new_section(slide: Slide) -> bool:
    """Single-line slides are section dividers. So is any slide with an explicit `section` header."""
    return len(slide.content) == 1 or slide.section is not None


# endregion


# region sectioned policy
def build_sectioned_outline(slides: list[Slide]) -> list[Section]:
    """Group slides into named sections, each holding one or more topics."""
    sections: list[Section] = []
    state: OutlineState = Idle()

    for slide in slides:
        # Close everything on a section divider
        if not isinstance(state, Idle) and starts_new_section(slide):
            state = Idle()

        if isinstance(state, Idle):
            section = Section(name=section_name(slide))
            sections.append(section)
            log.debug(f"New section: '{section.name}'")
            state = SectionOpen(section)

        # Close the topic if this slide belongs to a different one
        if isinstance(state, TopicOpen) and state.topic.name != topic_name(slide):
            state = SectionOpen(state.section)

        if isinstance(state, SectionOpen):
            topic = Topic.create_with_slide(topic_name(slide), slide)
            state.section.add_topic(topic)
            state = TopicOpen(state.section, topic)
            continue

        state.topic.add_slide(slide)

    return sections


# endregion


# region section-per-topic policy
def build_section_per_topic_outline(slides: list[Slide]) -> list[Section]:
    """Give each topic its own unnamed section; section boundaries in the deck are ignored."""
    sections: list[Section] = []
    state: Idle | TopicOpen = Idle()

    for slide in slides:
        name = topic_name(slide)
        if isinstance(state, TopicOpen) and state.topic.name == name:
            state.topic.add_slide(slide)
            continue

        topic = Topic.create_with_slide(name, slide)
        section = Section(name="", topics=[topic])
        sections.append(section)
        state = TopicOpen(section, topic)

    return sections


# endregion
