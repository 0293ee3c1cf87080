"""
GraphCompiler - cached front door over the pure graph -> fragment shader compile.

The host asks for a shader after every edit, and many edits (selecting a
node, re-setting a value to what it already was) leave the shader text
unchanged. Results are memoized by a structural fingerprint of the graph.

Caching Strategy:
- Fingerprint = SHA-256 over compile options, sink id, node ids/kinds/settings and links
- Entries live in a bounded LRU; the least recently compiled graph is evicted first
- Graph.revision short-circuits re-hashing a graph object that has not been edited,
  so edits must go through Graph methods (which bump it)
- The pure compile_graph never sees the cache and keeps no state between calls
"""

import logging
import hashlib
import weakref
from typing import Any, Dict, Optional, Tuple
from collections import OrderedDict

from ..config import DEFAULT_OPTIONS, CompileOptions
from ..codegen.glsl import compile_graph as _compile_uncached
from ..codegen.result import CompiledShader
from ..ir.graph import Graph

logger = logging.getLogger(__name__)


class LRUCache:
    """
    Bounded mapping of fingerprint -> CompiledShader.

    Reads and writes both count as a use; once `capacity` entries are held,
    storing a new one drops the entry untouched for longest.
    """

    def __init__(self, capacity: int = 16):
        self.capacity = max(1, capacity)
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Optional[Any]:
        value = self._entries.get(key)
        if value is None:
            self._misses += 1
            return None
        self._entries.move_to_end(key)
        self._hits += 1
        return value

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug(f"Evicted compiled shader {evicted[:8]}...")

    def invalidate(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        self._entries.clear()
        self._hits = self._misses = self._evictions = 0

    def stats(self) -> Dict[str, Any]:
        lookups = self._hits + self._misses
        return {
            'size': len(self._entries),
            'capacity': self.capacity,
            'hits': self._hits,
            'misses': self._misses,
            'evictions': self._evictions,
            'hit_rate': (100.0 * self._hits / lookups) if lookups else 0.0,
        }


class GraphCompiler:
    """
    Compiles Graphs to fragment shaders, reusing results for unchanged graphs.

    Example:
        compiler = GraphCompiler()
        shader = compiler.compile(graph)
        graph.set_config(node_id, "value", 0.5)
        shader = compiler.compile(graph)   # fingerprint changed, recompiled
    """

    def __init__(self, cache_capacity: int = 16, options: CompileOptions = DEFAULT_OPTIONS):
        self.options = options
        self._cache = LRUCache(capacity=cache_capacity)
        # id(graph) -> (weak ref, revision, fingerprint); the ref guards against id reuse
        self._fingerprints: Dict[int, Tuple[weakref.ref, int, str]] = {}

    def compile(self, graph: Graph) -> CompiledShader:
        key = self.fingerprint(graph)

        shader = self._cache.get(key)
        if shader is not None:
            logger.debug(f"Shader cache hit for '{graph.name}' ({key[:8]}...)")
            return shader

        logger.debug(f"Shader cache miss for '{graph.name}' ({key[:8]}...), compiling")
        shader = _compile_uncached(graph, self.options)
        self._cache.put(key, shader)
        return shader

    def fingerprint(self, graph: Graph) -> str:
        """Structural hash of `graph`, recomputed only after an edit bumps its revision."""
        known = self._fingerprints.get(id(graph))
        if known is not None and known[0]() is graph and known[1] == graph.revision:
            return known[2]
        key = self._compute_graph_hash(graph)
        self._fingerprints[id(graph)] = (weakref.ref(graph), graph.revision, key)
        return key

    def _compute_graph_hash(self, graph: Graph) -> str:
        """
        Everything the emitted text depends on: options, sink id, every node
        (id, kind, sorted settings; unreachable nodes too, since their
        parameters still declare uniforms) and every link.
        """
        hasher = hashlib.sha256()
        hasher.update(f"options:{self.options.cache_key()}\n".encode())
        hasher.update(f"sink:{graph.output_id}\n".encode())

        for node in graph.sorted_nodes():
            settings = ";".join(f"{key}={node.config[key]!r}" for key in sorted(node.config))
            hasher.update(f"node:{node.id}:{node.kind.name}:{settings}\n".encode())

        for to_node, to_pin in sorted(graph.links):
            link = graph.links[(to_node, to_pin)]
            hasher.update(f"link:{link.from_node}.{link.from_pin}>{to_node}.{to_pin}\n".encode())

        return hasher.hexdigest()

    def invalidate(self, graph: Graph) -> bool:
        """Forget the cached shader for `graph`. Returns False if none was cached."""
        self._fingerprints.pop(id(graph), None)
        return self._cache.invalidate(self._compute_graph_hash(graph))

    def clear_cache(self) -> None:
        self._cache.clear()
        self._fingerprints.clear()
        logger.debug("Shader cache cleared")

    def stats(self) -> Dict[str, Any]:
        return self._cache.stats()


_global_compiler: Optional[GraphCompiler] = None


def get_compiler() -> GraphCompiler:
    """Process-wide GraphCompiler shared by compile_cached."""
    global _global_compiler
    if _global_compiler is None:
        _global_compiler = GraphCompiler()
    return _global_compiler


def compile_cached(graph: Graph) -> CompiledShader:
    return get_compiler().compile(graph)
