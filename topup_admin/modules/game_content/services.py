"""Per-game storefront content: description, instruction, reviews and FAQ."""

import logging

from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

HIGHLIGHT_SEPARATOR = ' | '

# English copies of the Russian fields, suffixed with _en on the wire
TRANSLATED_FIELDS = ('gameName', 'title', 'description', 'mainDescription')


def parse_steps(text: str) -> list:
    """One instruction step per non-empty line."""
    steps = []
    for line in (text or '').splitlines():
        line = line.strip()
        if not line:
            continue
        step_text, _, highlight = line.partition(HIGHLIGHT_SEPARATOR)
        step = {'id': f'step-{len(steps) + 1}', 'text': step_text.strip()}
        if highlight.strip():
            step['highlight'] = highlight.strip()
        steps.append(step)
    return steps


def format_steps(steps: list, suffix: str = '') -> str:
    lines = []
    for step in steps or []:
        line = step.get('text' + suffix) or ''
        if step.get('highlight' + suffix):
            line = f"{line}{HIGHLIGHT_SEPARATOR}{step['highlight' + suffix]}"
        lines.append(line)
    if suffix:
        while lines and not lines[-1]:
            lines.pop()
    return '\n'.join(lines)


def translate_steps(steps: list, text: str) -> list:
    """
    Attach English text to existing steps, line N to step N.

    Blank lines leave a step untranslated. Raises ValueError when there are
    more lines than steps.
    """
    lines = (text or '').splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) > len(steps or []):
        raise ValueError("There are more translated lines than instruction steps.")

    translated = []
    for index, step in enumerate(steps or []):
        step = {k: v for k, v in step.items() if k not in ('text_en', 'highlight_en')}
        line = lines[index].strip() if index < len(lines) else ''
        if line:
            step_text, _, highlight = line.partition(HIGHLIGHT_SEPARATOR)
            step['text_en'] = step_text.strip()
            if highlight.strip():
                step['highlight_en'] = highlight.strip()
        translated.append(step)
    return translated


def keep_step_translations(steps: list, current: list) -> list:
    """Carry English text of the current steps over to re-entered steps, by position."""
    current = current or []
    for index, step in enumerate(steps):
        if index >= len(current):
            break
        for key in ('text_en', 'highlight_en'):
            if current[index].get(key):
                step[key] = current[index][key]
    return steps


def has_translation(content: dict) -> bool:
    if any(content.get(f'{name}_en') for name in TRANSLATED_FIELDS):
        return True
    instruction = content.get('instruction') or {}
    if instruction.get('headerText_en'):
        return True
    return any(step.get('text_en') for step in instruction.get('steps') or [])


class GameContentService:
    @staticmethod
    def all_games() -> list:
        body = get_api_client().get('/game-content') or {}
        if isinstance(body, list):
            return body
        return body.get('games') or []

    @staticmethod
    def available_games() -> list:
        return get_api_client().get('/games/available') or []

    @staticmethod
    def game_choices(exclude=()) -> list:
        """Games that can still get content, as select choices."""
        taken = set(exclude)
        return [(g['gameId'], g.get('gameName') or g['gameId'])
                for g in GameContentService.available_games() if g.get('gameId') not in taken]

    @staticmethod
    def get_content(game_id):
        return get_api_client().get(f'/game-content/{game_id}')

    @staticmethod
    def _instruction(form, current: dict = None) -> dict:
        current = current or {}
        instruction = {
            'headerText': form.headerText.data.strip(),
            'steps': keep_step_translations(parse_steps(form.steps.data), current.get('steps')),
            'images': current.get('images') or [],
        }
        if current.get('headerText_en'):
            instruction['headerText_en'] = current['headerText_en']
        return instruction

    @staticmethod
    def create_content(form):
        payload = {
            'gameId': form.gameId.data,
            'description': form.description.data.strip(),
            'instruction': GameContentService._instruction(form),
        }
        logger.info("Creating content for game %s", payload['gameId'])
        return get_api_client().post('/game-content', json_data=payload)

    @staticmethod
    def update_content(game_id, form, current: dict = None):
        payload = {
            'description': form.description.data.strip(),
            'instruction': GameContentService._instruction(form, (current or {}).get('instruction')),
        }
        if form.gameName.data:
            payload['gameName'] = form.gameName.data.strip()
        return get_api_client().patch(f'/game-content/{game_id}', json_data=payload)

    @staticmethod
    def update_translation(game_id, form, current: dict):
        """Send the English fields; the Russian content is left as it is."""
        instruction = dict(current.get('instruction') or {})
        instruction['headerText_en'] = (form.headerText_en.data or '').strip()
        instruction['steps'] = translate_steps(instruction.get('steps'), form.steps_en.data)
        payload = {
            'gameName_en': (form.gameName_en.data or '').strip(),
            'description_en': (form.description_en.data or '').strip(),
            'instruction': instruction,
        }
        logger.info("Updating English content of game %s", game_id)
        return get_api_client().patch(f'/game-content/{game_id}', json_data=payload)

    @staticmethod
    def delete_content(game_id):
        return get_api_client().delete(f'/game-content/{game_id}')

    @staticmethod
    def add_review(game_id, form):
        return get_api_client().post(f'/game-content/{game_id}/reviews', json_data={
            'userName': form.userName.data.strip(),
            'rating': form.rating.data,
            'comment': form.comment.data.strip(),
            'verified': bool(form.verified.data),
        })

    @staticmethod
    def delete_review(game_id, review_id):
        return get_api_client().delete(f'/game-content/{game_id}/reviews/{review_id}')

    @staticmethod
    def add_faq(game_id, form):
        return get_api_client().post(f'/game-content/{game_id}/faq', json_data={
            'question': form.question.data.strip(),
            'answer': form.answer.data.strip(),
        })

    @staticmethod
    def delete_faq(game_id, faq_id):
        return get_api_client().delete(f'/game-content/{game_id}/faq/{faq_id}')

    @staticmethod
    def form_data(content: dict) -> dict:
        instruction = content.get('instruction') or {}
        return {
            'gameName': content.get('gameName'),
            'description': content.get('description'),
            'headerText': instruction.get('headerText'),
            'steps': format_steps(instruction.get('steps')),
        }

    @staticmethod
    def translation_data(content: dict) -> dict:
        instruction = content.get('instruction') or {}
        return {
            'gameName_en': content.get('gameName_en'),
            'description_en': content.get('description_en'),
            'headerText_en': instruction.get('headerText_en'),
            'steps_en': format_steps(instruction.get('steps'), suffix='_en'),
        }
