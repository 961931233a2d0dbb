from .vocabulary import Vocabulary, VocabularyItem, card_identity, load_vocabulary
from .review import GradeRequest, CheckRequest, SpeechRequest, ReviewStateOut

__all__ = [
    'Vocabulary', 'VocabularyItem', 'card_identity', 'load_vocabulary',
    'GradeRequest', 'CheckRequest', 'SpeechRequest', 'ReviewStateOut',
]
