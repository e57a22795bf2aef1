"""Pre-authored answers served when no provider is available.

Each topic answer follows the same outline: a framing sentence, an
explanation, fenced code with a language tag, a complexity or best
practices section and an invitation to keep going.
"""

BINARY_SEARCH_TREE_RESPONSE = """A binary search tree keeps values in sorted order while still giving fast lookups, inserts and deletes. Here is how to build one from scratch.

## How a BST is organised

Every node obeys three rules:
- Values in the left subtree are smaller than the node
- Values in the right subtree are larger than the node
- Both subtrees are binary search trees themselves

Following those rules means each comparison throws away half of the remaining tree when it is balanced.

```javascript
class TreeNode {
    constructor(value) {
        this.value = value;
        this.left = null;
        this.right = null;
    }
}

class BinarySearchTree {
    constructor() {
        this.root = null;
    }

    insert(value) {
        const node = new TreeNode(value);
        if (this.root === null) {
            this.root = node;
            return this;
        }
        let current = this.root;
        while (true) {
            if (value === current.value) return this; // ignore duplicates
            const side = value < current.value ? 'left' : 'right';
            if (current[side] === null) {
                current[side] = node;
                return this;
            }
            current = current[side];
        }
    }

    contains(value) {
        let current = this.root;
        while (current !== null) {
            if (value === current.value) return true;
            current = value < current.value ? current.left : current.right;
        }
        return false;
    }

    remove(value, node = this.root, parent = null) {
        while (node !== null && node.value !== value) {
            parent = node;
            node = value < node.value ? node.left : node.right;
        }
        if (node === null) return false;

        if (node.left !== null && node.right !== null) {
            // Two children: copy the in-order successor, then delete it.
            let successorParent = node;
            let successor = node.right;
            while (successor.left !== null) {
                successorParent = successor;
                successor = successor.left;
            }
            node.value = successor.value;
            return this.remove(successor.value, successor, successorParent);
        }

        const child = node.left !== null ? node.left : node.right;
        if (parent === null) this.root = child;
        else if (parent.left === node) parent.left = child;
        else parent.right = child;
        return true;
    }

    inOrder(node = this.root, result = []) {
        if (node !== null) {
            this.inOrder(node.left, result);
            result.push(node.value);
            this.inOrder(node.right, result);
        }
        return result;
    }
}

const tree = new BinarySearchTree();
[50, 30, 70, 20, 40, 60, 80].forEach(v => tree.insert(v));
console.log(tree.inOrder());   // [20, 30, 40, 50, 60, 70, 80]
console.log(tree.contains(60)); // true
tree.remove(30);
console.log(tree.inOrder());   // [20, 40, 50, 60, 70, 80]
```

## Complexity Analysis

- **Search, insert, delete**: O(log n) on a balanced tree, O(n) when the tree degenerates into a list
- **In-order traversal**: O(n), and it always yields the values in sorted order
- **Space**: O(n) for the nodes

**Best practices:**
- Insert values in random order, or use a self-balancing variant (AVL, red-black) for sorted input
- Decide up front how duplicates are handled
- Prefer the iterative versions for very deep trees to avoid stack overflows

Want to add a balancing step, level-order traversal or a version in another language? Just ask!"""

SORTING_ALGORITHM_RESPONSE = """QuickSort is one of the fastest general-purpose sorting algorithms, and the idea behind it is short enough to remember. Let me walk you through it.

## The Core Idea

QuickSort is a divide-and-conquer algorithm:
- Pick a **pivot** element
- **Partition** the array so smaller values sit left of the pivot and larger values sit right of it
- **Recurse** on both sides until every part has zero or one element

Here is the readable version that builds new arrays:

```javascript
function quickSort(arr) {
    if (arr.length <= 1) return arr;

    const pivot = arr[Math.floor(arr.length / 2)];
    const left = arr.filter(x => x < pivot);
    const middle = arr.filter(x => x === pivot);
    const right = arr.filter(x => x > pivot);

    return [...quickSort(left), ...middle, ...quickSort(right)];
}

console.log(quickSort([64, 34, 25, 12, 22, 11, 90])); // [11, 12, 22, 25, 34, 64, 90]
```

And the in-place version you would use in production, with Lomuto partitioning:

```javascript
function quickSortInPlace(arr, low = 0, high = arr.length - 1) {
    if (low < high) {
        const pivotIndex = partition(arr, low, high);
        quickSortInPlace(arr, low, pivotIndex - 1);
        quickSortInPlace(arr, pivotIndex + 1, high);
    }
    return arr;
}

function partition(arr, low, high) {
    const pivot = arr[high];
    let i = low - 1;
    for (let j = low; j < high; j++) {
        if (arr[j] <= pivot) {
            i++;
            [arr[i], arr[j]] = [arr[j], arr[i]];
        }
    }
    [arr[i + 1], arr[high]] = [arr[high], arr[i + 1]];
    return i + 1;
}

console.log(quickSortInPlace([5, 2, 9, 1, 5, 6])); // [1, 2, 5, 5, 6, 9]
```

## Performance Characteristics

- **Average time**: O(n log n)
- **Worst time**: O(n^2), when the pivot is always the smallest or largest element
- **Space**: O(log n) recursion stack for the in-place version, O(n) for the filtering version
- **Stable**: no, equal elements may change order

## Pro Tips

- Choose a random or median-of-three pivot to avoid the worst case on sorted input
- Switch to insertion sort for tiny partitions (around 10 elements)
- Use three-way partitioning when the data has many duplicates

Would you like to compare it with MergeSort or HeapSort, or see it in another language?"""

UI_COMPONENT_WITH_STATE_RESPONSE = """Let me show you a practical React component built with hooks. It covers the patterns you will reach for in most real applications.

## Todo App Component

The component keeps its list in state, persists it to `localStorage` with an effect, and derives the filtered view on every render.

```jsx
import { useEffect, useState } from 'react';

const STORAGE_KEY = 'todos';

export default function TodoApp() {
    const [todos, setTodos] = useState(() => {
        const saved = localStorage.getItem(STORAGE_KEY);
        return saved ? JSON.parse(saved) : [];
    });
    const [text, setText] = useState('');
    const [filter, setFilter] = useState('all');

    useEffect(() => {
        localStorage.setItem(STORAGE_KEY, JSON.stringify(todos));
    }, [todos]);

    const addTodo = (event) => {
        event.preventDefault();
        const trimmed = text.trim();
        if (!trimmed) return;
        setTodos(prev => [...prev, { id: Date.now(), text: trimmed, done: false }]);
        setText('');
    };

    const toggleTodo = (id) =>
        setTodos(prev => prev.map(t => (t.id === id ? { ...t, done: !t.done } : t)));

    const removeTodo = (id) => setTodos(prev => prev.filter(t => t.id !== id));

    const visible = todos.filter(t =>
        filter === 'all' ? true : filter === 'done' ? t.done : !t.done
    );

    return (
        <div className="todo-app">
            <form onSubmit={addTodo}>
                <input
                    value={text}
                    onChange={e => setText(e.target.value)}
                    placeholder="What needs doing?"
                />
                <button type="submit">Add</button>
            </form>

            <div className="filters">
                {['all', 'active', 'done'].map(name => (
                    <button
                        key={name}
                        className={filter === name ? 'active' : ''}
                        onClick={() => setFilter(name)}
                    >
                        {name}
                    </button>
                ))}
            </div>

            <ul>
                {visible.map(todo => (
                    <li key={todo.id}>
                        <input
                            type="checkbox"
                            checked={todo.done}
                            onChange={() => toggleTodo(todo.id)}
                        />
                        <span className={todo.done ? 'done' : ''}>{todo.text}</span>
                        <button onClick={() => removeTodo(todo.id)}>Delete</button>
                    </li>
                ))}
            </ul>

            <p>{todos.filter(t => !t.done).length} items left</p>
        </div>
    );
}
```

## Key React Hooks Explained

**useState** holds values that should trigger a re-render when they change. Pass a function when the next value depends on the previous one:

```jsx
setCount(prev => prev + 1);
```

**useEffect** runs side effects after render. Return a cleanup function for subscriptions and timers:

```jsx
useEffect(() => {
    const id = setInterval(tick, 1000);
    return () => clearInterval(id);
}, []);
```

## Best Practices

- List every value an effect reads in its dependency array
- Never mutate state directly; always create new arrays and objects
- Give list items a stable `key` such as an id, not the array index
- Derive values like the filtered list during render instead of storing them in state

Want to add editing, a custom hook, or move the state into context? Let me know!"""

REST_API_CRUD_RESPONSE = """Let me show you how to build a REST API with Express that covers every CRUD operation with validation and proper error handling.

## Complete REST API Example

The resources live in memory so the example runs as-is; swap the array for a database later.

```javascript
const express = require('express');

const app = express();
app.use(express.json());

let users = [];
let nextId = 1;

function validateUser(body) {
    const errors = [];
    if (!body.name || typeof body.name !== 'string') errors.push('name is required');
    if (!body.email || !/^[^@\\s]+@[^@\\s]+$/.test(body.email)) errors.push('a valid email is required');
    return errors;
}

// List
app.get('/api/users', (req, res) => {
    res.json({ success: true, data: users });
});

// Read
app.get('/api/users/:id', (req, res) => {
    const user = users.find(u => u.id === Number(req.params.id));
    if (!user) return res.status(404).json({ success: false, error: 'User not found' });
    res.json({ success: true, data: user });
});

// Create
app.post('/api/users', (req, res) => {
    const errors = validateUser(req.body);
    if (errors.length) return res.status(400).json({ success: false, errors });
    const user = { id: nextId++, name: req.body.name, email: req.body.email };
    users.push(user);
    res.status(201).json({ success: true, data: user });
});

// Update
app.put('/api/users/:id', (req, res) => {
    const user = users.find(u => u.id === Number(req.params.id));
    if (!user) return res.status(404).json({ success: false, error: 'User not found' });
    const errors = validateUser(req.body);
    if (errors.length) return res.status(400).json({ success: false, errors });
    Object.assign(user, { name: req.body.name, email: req.body.email });
    res.json({ success: true, data: user });
});

// Delete
app.delete('/api/users/:id', (req, res) => {
    const before = users.length;
    users = users.filter(u => u.id !== Number(req.params.id));
    if (users.length === before) return res.status(404).json({ success: false, error: 'User not found' });
    res.status(204).send();
});

// Central error handler
app.use((err, req, res, next) => {
    console.error(err);
    res.status(500).json({ success: false, error: 'Internal server error' });
});

const PORT = process.env.PORT || 3000;
app.listen(PORT, () => console.log(`API listening on port ${PORT}`));
```

Try it from the command line:

```bash
curl -X POST http://localhost:3000/api/users \\
     -H "Content-Type: application/json" \\
     -d '{"name": "Ada", "email": "ada@example.com"}'
curl http://localhost:3000/api/users
```

## HTTP Methods & Status Codes

**Methods:**
- `GET` reads, `POST` creates, `PUT` replaces, `DELETE` removes

**Common Status Codes:**
- `200` OK, `201` Created, `204` No Content
- `400` Bad Request, `404` Not Found, `500` Internal Server Error

## Best Practices

- Validate every request body before touching your data
- Keep one error handler so failures always produce the same JSON shape
- Version your routes (`/api/v1/...`) before clients depend on them
- Add authentication, rate limiting and logging before going to production

Want me to connect this to MongoDB or PostgreSQL, or add JWT authentication next?"""

GENERIC_RESPONSE = """Hey there! I'm here to help you with coding and development. What would you like to build today?

## What I can help with

**Learning & Understanding**
- Programming concepts and fundamentals
- Data structures and algorithms
- Design patterns and best practices

**Building Projects**
- Web applications with React, Vue or Angular
- Backend APIs with Node.js, Express or Python
- Command-line tools and scripts

**Debugging & Optimization**
- Finding and fixing bugs
- Performance tuning and refactoring

Here is the kind of small, tested building block I like to start from:

```python
def chunk(items, size):
    \"\"\"Split a list into consecutive pieces of at most ``size`` items.\"\"\"
    if size <= 0:
        raise ValueError("size must be positive")
    return [items[i:i + size] for i in range(0, len(items), size)]


print(chunk([1, 2, 3, 4, 5], 2))  # [[1, 2], [3, 4], [5]]
```

## Best Practices

- Start with the simplest version that works, then measure before optimising
- Validate inputs at the edges of your code
- Write a small test for every bug you fix

## Try asking me:

- "Build a REST API with user authentication"
- "Explain how React hooks work with examples"
- "Implement a binary search tree"
- "Help me debug this async function"

What would you like to work on? I'm here to help!"""

NON_DEV_RESPONSE = """Thanks for reaching out! I'm built specifically to help with programming and software development questions.

I'd be happy to help you with things like:

- **Writing code** - functions, classes, algorithms, complete applications
- **Debugging** - finding and fixing errors in your code
- **Learning** - programming concepts, best practices, design patterns
- **Building projects** - web apps, APIs, tools and more
- **Code reviews** - improving structure, performance and readability

For example, you could ask:
- "How do I create a REST API with authentication?"
- "Can you help debug this React component?"
- "What's the best way to implement a binary search tree?"

Ask me any programming question and I'll be glad to help!"""

ULTIMATE_FALLBACK_RESPONSE = """Hey there! I'm here to help you with coding and development.

I can assist with:

- **Writing code** - from simple functions to complete applications
- **Debugging** - tracking down and fixing bugs
- **Learning** - programming concepts step by step
- **Building projects** - web apps, APIs, tools and more

What would you like to work on today?"""
