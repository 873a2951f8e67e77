import heapq
from collections import Counter

class UnknownSymbolError(ValueError): # raised when the text holds a symbol the code table does not cover
    def __init__(self, symbol):
        super().__init__(f"no Huffman code for symbol {symbol!r}")
        self.symbol = symbol

class HuffmanNode: # Node for Huffman tree
    def __init__(self, frequency, symbol = None, left = None, right = None):
        self.frequency = frequency
        self.symbol = symbol    # character or None for internal nodes
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None and self.right is None

    def __str__(self): # S-expression for inspection only: ([symbol frequency] left right)
        symbol = self.symbol if self.symbol is not None else ""
        left = str(self.left) if self.left is not None else ""
        right = str(self.right) if self.right is not None else ""
        return f"([{symbol} {self.frequency}] {left} {right})"

    def __repr__(self):
        return f"HuffmanNode(frequency={self.frequency!r}, symbol={self.symbol!r})"


def count_frequencies(text): # text: str, returns dict of symbol -> count in order of first appearance
    return dict(Counter(text))

def build_huffman_tree(frequency_table): # frequency_table: dict of symbol -> frequency
    """
    Greedy merge of the two lightest nodes until one root remains.

    Ties on frequency are broken by creation order: leaves are numbered in the
    frequency table's iteration order, merged nodes take the next number, and
    the lower number leaves the heap first. The first node popped in a merge
    becomes the left child.
    """
    if not frequency_table:
        raise ValueError("cannot build a Huffman tree from an empty frequency table")

    leaves = [HuffmanNode(frequency, symbol) for symbol, frequency in frequency_table.items()]

    # Single distinct symbol -> wrap it so it still gets a one-bit code
    if len(leaves) == 1:
        leaf = leaves[0]
        return HuffmanNode(leaf.frequency, left = leaf)

    priority_queue = [(node.frequency, order, node) for order, node in enumerate(leaves)]
    heapq.heapify(priority_queue)
    order = len(priority_queue)

    while len(priority_queue) > 1:
        _, _, left = heapq.heappop(priority_queue)
        _, _, right = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(left.frequency + right.frequency, left = left, right = right)
        heapq.heappush(priority_queue, (merged_node.frequency, order, merged_node))
        order += 1

    return priority_queue[0][2] # root of the tree

def generate_huffman_codes(root): # root: root of the Huffman tree, returns dict of symbol -> tuple of bits
    codes = {}
    stack = [(root, ())] # (node, path from root) pairs
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = path
            continue
        # right pushed first so the left subtree is visited first
        if node.right is not None:
            stack.append((node.right, path + (True,)))
        if node.left is not None:
            stack.append((node.left, path + (False,)))
    return codes

def huffman_encode(text, code_table): # text: str to encode, code_table: dict of symbol -> bits
    encoded = []
    for symbol in text:
        code = code_table.get(symbol)
        if code is None:
            raise UnknownSymbolError(symbol)
        encoded.extend(code)
    return encoded

def huffman_decode(bits, root) -> str: # bits: iterable of bools (True = right), root: root of the Huffman tree
    """
    Walk the tree bit by bit, emitting a symbol at every leaf.

    Returns "" when there is no tree. Bits left over after the last leaf are
    dropped without error.
    """
    if root is None:
        return ""

    decoded = []
    node = root
    for bit in bits:
        node = node.right if bit else node.left
        if node is None:
            raise ValueError("bit sequence follows a branch that is not in the tree")

        # Leaf
        if node.is_leaf():
            decoded.append(node.symbol)
            node = root # reset to the root for the next symbol

    return "".join(decoded)

def weighted_path_length(frequency_table, code_table) -> int: # sum of frequency * code length
    return sum(frequency * len(code_table[symbol]) for symbol, frequency in frequency_table.items())

def leaves(root): # yields the leaf nodes left to right
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            yield node
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


class HuffmanCodec:
    """
    Holds one tree and the code table derived from it.

    The first non-empty encode() builds both from that text and later calls
    reuse them; fit() replaces the pair. Unrelated texts should get their own
    codec, since a symbol missing from the cached table raises
    UnknownSymbolError.
    """

    def __init__(self, tree = None):
        self.tree = tree
        self.codes = generate_huffman_codes(tree) if tree is not None else None

    def fit(self, text):
        self.tree = build_huffman_tree(count_frequencies(text))
        self.codes = generate_huffman_codes(self.tree)
        return self

    def encode(self, text):
        if not text:
            return []
        if self.tree is None:
            self.fit(text)
        return huffman_encode(text, self.codes)

    def decode(self, bits):
        return huffman_decode(bits, self.tree)
