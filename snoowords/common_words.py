from __future__ import annotations

from typing import Dict, FrozenSet

# Short everyday words that frequency lists tend to miss or rank too low.
# Every entry is 3 or 4 lowercase letters.

COMMON_WORDS: Dict[str, FrozenSet[str]] = {
    'food': frozenset({
        'egg', 'ham', 'jam', 'pie', 'tea', 'bun', 'yam', 'fig', 'nut', 'oat',
        'rye', 'soy', 'gum', 'cod', 'eel', 'bean', 'beef', 'cake', 'corn',
        'milk', 'meat', 'rice', 'soup', 'salt', 'pear', 'plum', 'lime', 'kiwi',
        'taco', 'tofu', 'stew', 'meal', 'food', 'loaf', 'pork',
        'lamb', 'chip', 'mint', 'sage', 'herb', 'dill', 'leek', 'kale', 'beet',
        'date', 'wine', 'beer', 'cola', 'brew',
    }),
    'animals': frozenset({
        'ant', 'ape', 'bat', 'bee', 'cat', 'cow', 'dog', 'elk', 'emu', 'fox',
        'gnu', 'hen', 'hog', 'owl', 'pig', 'ram', 'rat', 'yak', 'ewe', 'cub',
        'pup', 'kit', 'bear', 'bird', 'boar', 'buck', 'bull', 'calf', 'colt',
        'crab', 'crow', 'deer', 'dove', 'duck', 'fawn', 'fish', 'flea', 'frog',
        'goat', 'gull', 'hare', 'hawk', 'lamb', 'lion', 'lynx', 'mole', 'moth',
        'mule', 'newt', 'puma', 'seal', 'slug', 'swan', 'toad', 'wasp', 'wolf',
        'worm', 'wren', 'mice', 'mink', 'orca', 'pony', 'kiwi',
    }),
    'actions': frozenset({
        'ask', 'bet', 'bid', 'dig', 'fly', 'hit', 'hop', 'hug', 'jog', 'mix',
        'nap', 'pat', 'rub', 'run', 'sew', 'sip', 'sit', 'ski', 'tap', 'tug',
        'win', 'add', 'cut', 'dip', 'cry', 'fix', 'bake', 'bite', 'blow',
        'chew', 'clap', 'cook', 'dive', 'draw', 'drop', 'grab', 'grin', 'jump',
        'kick', 'kiss', 'knit', 'lick', 'nod', 'pull', 'push', 'read', 'ride',
        'roll', 'sing', 'skip', 'spin', 'swim', 'talk', 'toss', 'walk', 'wave',
        'wink', 'wipe', 'yell', 'yawn',
    }),
    'household': frozenset({
        'bed', 'cup', 'fan', 'jar', 'lid', 'mat', 'mop', 'mug', 'pan', 'pot',
        'rug', 'tub', 'tap', 'bin', 'cot', 'sofa', 'lamp', 'sink', 'desk',
        'door', 'fork', 'oven', 'vase', 'bowl', 'dish', 'sock', 'soap', 'shed',
        'roof', 'wall', 'tile', 'bath', 'comb', 'hook', 'rack', 'sack', 'pail',
        'peg', 'iron', 'fuse', 'plug', 'cord', 'jug',
    }),
    'nature': frozenset({
        'sea', 'sky', 'sun', 'bay', 'bog', 'dew', 'fog', 'ice', 'mud', 'oak',
        'elm', 'fir', 'ivy', 'log', 'air', 'ash', 'gem', 'ore', 'hay', 'sod',
        'bush', 'cave', 'clay', 'cove', 'dune', 'dust', 'fern', 'fire', 'glen',
        'hill', 'lake', 'leaf', 'mist', 'moon', 'moss', 'peak', 'pond', 'pool',
        'rain', 'reef', 'rock', 'root', 'rose', 'sand', 'seed', 'snow', 'soil',
        'star', 'stem', 'tide', 'tree', 'vale', 'vine', 'wave', 'weed', 'wind',
        'wood', 'lily', 'palm', 'pine',
    }),
    'body': frozenset({
        'arm', 'ear', 'eye', 'gum', 'hip', 'jaw', 'leg', 'lip', 'rib', 'toe',
        'lap', 'shin', 'back', 'body', 'bone', 'brow', 'calf', 'chin', 'face',
        'foot', 'hair', 'hand', 'head', 'heel', 'knee', 'lash', 'lung', 'nail',
        'neck', 'nose', 'palm', 'pore', 'skin', 'vein', 'toes',
        'cell', 'limb', 'fist', 'gut',
    }),
    'objects': frozenset({
        'bag', 'bat', 'box', 'can', 'cap', 'car', 'key', 'map', 'net', 'pen',
        'pin', 'rod', 'saw', 'toy', 'van', 'bus', 'cab', 'jet', 'kit', 'tag',
        'web', 'wig', 'ball', 'bell', 'belt', 'bike', 'boat', 'book', 'boot',
        'card', 'cart', 'coat', 'coin', 'disk', 'drum', 'flag', 'gift', 'glue',
        'harp', 'kite', 'lock', 'mask', 'nail', 'note', 'pipe', 'ring', 'rope',
        'sail', 'ship', 'sign', 'tape', 'tent', 'tool', 'vest', 'wire', 'ruby',
    }),
    'qualities': frozenset({
        'bad', 'big', 'dry', 'fat', 'hot', 'icy', 'mad', 'new', 'odd', 'old',
        'raw', 'red', 'sad', 'shy', 'wet', 'coy', 'fit', 'sly', 'low', 'tan',
        'bold', 'busy', 'calm', 'cold', 'cool', 'cozy', 'damp', 'dark', 'dull',
        'easy', 'fair', 'fast', 'fine', 'firm', 'glad', 'good', 'hard', 'high',
        'kind', 'late', 'lazy', 'long', 'loud', 'mild', 'neat', 'nice', 'pale',
        'poor', 'pure', 'rare', 'rich', 'ripe', 'safe', 'slow', 'soft', 'tall',
        'tame', 'thin', 'tidy', 'tiny', 'true', 'vast', 'warm', 'weak', 'wild',
        'wise',
    }),
    'time': frozenset({
        'day', 'now', 'era', 'eve', 'age', 'ago', 'dawn', 'dusk', 'hour',
        'noon', 'week', 'year', 'time', 'date', 'late', 'soon', 'past', 'next',
        'once', 'then', 'when', 'term', 'span', 'morn', 'tick', 'aeon',
    }),
    'verbs': frozenset({
        'act', 'are', 'ate', 'bow', 'buy', 'can', 'did', 'get', 'got', 'had',
        'has', 'let', 'lie', 'may', 'met', 'own', 'pay', 'put', 'ran', 'saw',
        'say', 'see', 'set', 'was', 'use', 'try', 'aim', 'beg', 'owe', 'vow',
        'been', 'came', 'come', 'does', 'done', 'find', 'gave', 'give', 'goes',
        'gone', 'have', 'hear', 'help', 'hold', 'keep', 'knew', 'know', 'left',
        'lend', 'like', 'live', 'look', 'lose', 'love', 'made', 'make', 'meet',
        'move', 'need', 'open', 'play', 'rest', 'said', 'seen', 'sell', 'send',
        'show', 'shut', 'stay', 'take', 'tell', 'took', 'turn', 'want', 'were',
        'went', 'wish', 'work',
    }),
    'prepositions': frozenset({
        'off', 'out', 'for', 'via', 'per', 'amid', 'from', 'into', 'near',
        'onto', 'over', 'past', 'than', 'till', 'unto', 'upon', 'with', 'atop',
        'down', 'like', 'anti', 'plus', 'save',
    }),
}

ALL_COMMON_WORDS: FrozenSet[str] = frozenset().union(*COMMON_WORDS.values())
